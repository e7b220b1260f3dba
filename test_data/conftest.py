import importlib.util
import json
import sys
import uuid
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    return (FIXTURES_DIR / name).read_text(encoding="utf-8")


@pytest.fixture
def book_text():
    return read_fixture("book.jsonld")


@pytest.fixture
def book_doc(book_text):
    return json.loads(book_text)


@pytest.fixture
def scalars_text():
    return read_fixture("scalars.json")


@pytest.fixture
def load_generated(tmp_path):
    """Importa il testo generato come un vero modulo Python."""
    loaded = []

    def _load(source):
        name = f"generated_{uuid.uuid4().hex}"
        path = tmp_path / f"{name}.py"
        path.write_text(source.text, encoding="utf-8")
        spec = importlib.util.spec_from_file_location(name, path)
        module = importlib.util.module_from_spec(spec)
        sys.modules[name] = module
        loaded.append(name)
        spec.loader.exec_module(module)
        return module

    yield _load

    for name in loaded:
        sys.modules.pop(name, None)
