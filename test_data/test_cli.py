import shutil
from pathlib import Path

import pytest
from pydantic import ValidationError

from jsonsource.cli import main, output_path
from jsonsource.config import Settings

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"


def test_generates_example_manifest(tmp_path):
    manifest = tmp_path / "sources.yml"
    shutil.copy(EXAMPLES_DIR / "sources.yml", manifest)
    shutil.copy(EXAMPLES_DIR / "book.jsonld", tmp_path / "book.jsonld")
    out = tmp_path / "generated"

    assert main([str(manifest), "--out", str(out)]) == 0

    book = out / "library" / "models" / "book.py"
    settings = out / "library" / "models" / "settings.py"
    assert book.exists() and settings.exists()
    assert "class Person(_BaseModel):" in book.read_text(encoding="utf-8")
    assert '    FontSize: _Union[int, float] = _Field(default=0, alias="fontSize")\n' in settings.read_text(encoding="utf-8")


def test_failure_exit_code(tmp_path):
    manifest = tmp_path / "sources.yml"
    manifest.write_text("models:\n  - class_name: Broken\n    json: '{\"a\": '\n", encoding="utf-8")
    assert main([str(manifest), "--out", str(tmp_path / "out")]) == 1


def test_invalid_environment_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("JSONSOURCE_COLLISION_POLICY", "bogus")
    with pytest.raises(ValidationError):
        Settings()

    manifest = tmp_path / "sources.yml"
    manifest.write_text("models:\n  - class_name: Doc\n    json: '{\"a\": 1}'\n", encoding="utf-8")
    assert main([str(manifest), "--out", str(tmp_path / "out")]) == 1
    assert not (tmp_path / "out").exists()


def test_environment_settings_are_read(monkeypatch):
    monkeypatch.setenv("JSONSOURCE_COLLISION_POLICY", "merge")
    monkeypatch.setenv("JSONSOURCE_MAX_DEPTH", "8")
    settings = Settings()
    assert (settings.collision_policy, settings.max_depth) == ("merge", 8)


def test_output_path():
    assert output_path(Path("gen"), "a.b", "x.py") == Path("gen", "a", "b", "x.py")
    assert output_path(Path("gen"), "", "x.py") == Path("gen", "x.py")
