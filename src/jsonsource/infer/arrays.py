# src/jsonsource/infer/arrays.py
from __future__ import annotations
from typing import Any, List
import logging

from .kinds import ValueKind, classify
from .schema import ArrayKind, ArrayNode

logger = logging.getLogger("jsonsource.infer")

_ELEMENT_KINDS = {
    ValueKind.STRING: ArrayKind.STRING,
    ValueKind.NUMBER: ArrayKind.NUMBER,
}


def resolve_array(name: str, values: List[Any]) -> ArrayNode:
    """
    Il primo elemento stringa o numero decide il tipo dell'intero array;
    gli elementi successivi non vengono esaminati.
    Arrays of booleans, arrays, objects, nulls and empty arrays are UNSUPPORTED.
    """
    for item in values:
        element = _ELEMENT_KINDS.get(classify(item))
        if element is not None:
            return ArrayNode(element=element)

    logger.debug(f"array '{name}' has no string/number element ({len(values)} items), unsupported")
    return ArrayNode(element=ArrayKind.UNSUPPORTED)
