# src/jsonsource/infer/kinds.py
from __future__ import annotations
from enum import Enum
from typing import Any


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"


def classify(value: Any) -> ValueKind:
    """
    Maps a value decoded by json.loads to its JSON kind.
    bool va controllato prima dei numeri: in Python True è anche un int.
    """
    if value is True:
        return ValueKind.TRUE
    if value is False:
        return ValueKind.FALSE
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, list):
        return ValueKind.ARRAY
    if isinstance(value, dict):
        return ValueKind.OBJECT
    # json.loads never yields anything else; treated like null (skipped)
    return ValueKind.NULL
