import httpx
import pytest

from jsonsource.errors import SourceLoadError
from jsonsource.sources.loader import describe, fetch_sample, load_sources, read_sample


def _write_manifest(tmp_path, body):
    path = tmp_path / "sources.yml"
    path.write_text(body, encoding="utf-8")
    return path


def test_load_sources(tmp_path):
    (tmp_path / "book.json").write_text('{"title": "x"}', encoding="utf-8")
    manifest = _write_manifest(tmp_path, """
models:
  - namespace: library.models
    class_name: Book
    file: book.json
  - class_name: Inline
    json: '{"a": 1}'
  - class_name: Remote
    url: https://example.org/remote.json
""")
    sources = load_sources(manifest)

    assert [s.class_name for s in sources] == ["Book", "Inline", "Remote"]
    assert read_sample(sources[0], base_dir=tmp_path) == '{"title": "x"}'
    assert read_sample(sources[1]) == '{"a": 1}'
    assert describe(sources[1])["origin"] == "inline"
    assert describe(sources[2])["origin"] == "https://example.org/remote.json"


@pytest.mark.parametrize("entry", [
    "  - class_name: NoOrigin\n",
    "  - class_name: TwoOrigins\n    json: '{}'\n    url: https://example.org\n",
    "  - namespace: missing.class_name\n    json: '{}'\n",
])
def test_invalid_entries(tmp_path, entry):
    manifest = _write_manifest(tmp_path, "models:\n" + entry)
    with pytest.raises(SourceLoadError):
        load_sources(manifest)


def test_missing_manifest(tmp_path):
    with pytest.raises(SourceLoadError):
        load_sources(tmp_path / "nope.yml")


def test_missing_sample_file(tmp_path):
    manifest = _write_manifest(tmp_path, "models:\n  - class_name: Book\n    file: gone.json\n")
    source = load_sources(manifest)[0]
    with pytest.raises(SourceLoadError):
        read_sample(source, base_dir=tmp_path)


def test_fetch_sample():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/book.jsonld":
            assert "application/ld+json" in request.headers["accept"]
            return httpx.Response(200, text='{"@type": "Book"}')
        return httpx.Response(404)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        assert fetch_sample("https://example.org/book.jsonld", client=client) == '{"@type": "Book"}'
        with pytest.raises(SourceLoadError):
            fetch_sample("https://example.org/missing.json", client=client)
