# src/jsonsource/generator.py
from __future__ import annotations
from typing import Optional
import json
import logging
import time

from .config import Settings
from .emit.emitter import GeneratedSource, check_class_name, check_namespace, emit
from .errors import DocumentTooDeepError, MalformedDocumentError
from .infer.engine import infer_document

logger = logging.getLogger("jsonsource.generator")


def parse_document(json_text: str):
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as e:
        raise MalformedDocumentError(f"sample is not valid JSON: {e}") from e
    except RecursionError as e:
        raise DocumentTooDeepError("sample nesting exceeds the JSON decoder recursion limit") from e


def generate(namespace: str, class_name: str, json_text: str,
             settings: Optional[Settings] = None) -> GeneratedSource:
    """
    Pipeline completa per una classe: parse del campione, inferenza, emissione.
    Nessun output parziale: qualsiasi errore viene propagato al chiamante.
    """
    settings = settings or Settings()
    start_time = time.time()

    check_class_name(class_name)
    check_namespace(namespace)

    logger.info(f"generating {namespace or '<none>'}.{class_name} from {len(json_text)} chars of JSON")
    document = parse_document(json_text)

    root_fields, registry = infer_document(
        document,
        class_name=class_name,
        discriminator_key=settings.discriminator_key,
        collision_policy=settings.collision_policy,
        max_depth=settings.max_depth,
    )
    logger.debug(f"{class_name}: {len(root_fields)} root fields, named types: {[t.name for t in registry]}")

    source = emit(class_name, namespace, root_fields, registry)

    duration = time.time() - start_time
    logger.info(f"generated {source.file_name} ({len(source.declarations)} classes) in {duration:.3f}s")
    return source
