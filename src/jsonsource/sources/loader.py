# src/jsonsource/sources/loader.py
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import httpx
from pydantic import BaseModel, ValidationError, model_validator

from ..config import load_manifest
from ..errors import SourceLoadError

logger = logging.getLogger("jsonsource.sources")


class ModelSource(BaseModel):
    """
    Una voce del manifest: dove trovare il campione JSON per una classe.
    Exactly one of `json`, `file`, `url` must be given.
    """
    namespace: str = ""
    class_name: str
    json_text: Optional[str] = None
    file: Optional[Path] = None
    url: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _json_alias(cls, data: Any) -> Any:
        # nel manifest la chiave è "json", che su BaseModel è un metodo deprecato
        if isinstance(data, dict) and "json" in data:
            data = dict(data)
            data["json_text"] = data.pop("json")
        return data

    @model_validator(mode="after")
    def _one_origin(self) -> "ModelSource":
        given = [k for k in ("json_text", "file", "url") if getattr(self, k) is not None]
        if len(given) != 1:
            raise ValueError(f"{self.class_name}: expected exactly one of json/file/url, got {given or 'none'}")
        return self


def load_sources(manifest_path: Path) -> List[ModelSource]:
    manifest_path = Path(manifest_path)
    if not manifest_path.exists():
        raise SourceLoadError(f"manifest not found: {manifest_path}")

    entries = load_manifest(manifest_path)
    sources: List[ModelSource] = []
    for i, entry in enumerate(entries):
        try:
            sources.append(ModelSource(**entry))
        except (ValidationError, TypeError) as e:
            raise SourceLoadError(f"invalid manifest entry #{i} in {manifest_path}: {e}") from e

    logger.info(f"loaded {len(sources)} model sources from {manifest_path}")
    return sources


def fetch_sample(url: str, timeout_s: int = 30, client: Optional[httpx.Client] = None) -> str:
    """Scarica il campione JSON via HTTP GET (Accept: application/json, application/ld+json)."""
    headers = {"Accept": "application/json, application/ld+json;q=0.9"}
    try:
        if client is not None:
            r = client.get(url, headers=headers)
        else:
            with httpx.Client(timeout=timeout_s, follow_redirects=True) as c:
                r = c.get(url, headers=headers)
        r.raise_for_status()
        return r.text
    except httpx.HTTPError as e:
        raise SourceLoadError(f"could not fetch sample {url}: {e!r}") from e


def read_sample(source: ModelSource, base_dir: Path = Path("."), timeout_s: int = 30,
                client: Optional[httpx.Client] = None) -> str:
    if source.json_text is not None:
        return source.json_text

    if source.file is not None:
        path = source.file if source.file.is_absolute() else Path(base_dir) / source.file
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise SourceLoadError(f"could not read sample {path}: {e}") from e

    logger.info(f"fetching sample for {source.class_name} from {source.url}")
    return fetch_sample(source.url, timeout_s=timeout_s, client=client)


def describe(source: ModelSource) -> Dict[str, Any]:
    origin = "inline" if source.json_text is not None else str(source.file or source.url)
    return {"namespace": source.namespace, "class_name": source.class_name, "origin": origin}
