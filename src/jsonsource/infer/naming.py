# src/jsonsource/infer/naming.py
from __future__ import annotations
from typing import Dict
import keyword
import re

RE_NOT_IDENT = re.compile(r'[^0-9A-Za-z_]')
RE_TYPE_LOCAL = re.compile(r'[/#:](?!.*[/#:])')

FALLBACK = "Field"


def resolve(raw_key: str) -> str:
    """
    Chiave JSON -> identificatore: rimuove '@', prima lettera maiuscola.
    `@id` -> `Id`, `givenName` -> `GivenName`, `first-name` -> `First_name`.
    """
    s = raw_key.replace("@", "")
    s = RE_NOT_IDENT.sub("_", s).lstrip("_")
    if not s:
        return FALLBACK
    if s[0].isdigit():
        s = FALLBACK + s
    s = s[:1].upper() + s[1:]
    if keyword.iskeyword(s):
        s += "_"
    return s


def resolve_type_name(discriminator: str) -> str:
    """
    Discriminator value -> class name. JSON-LD often uses IRIs or CURIEs
    (`http://schema.org/Person`, `schema:Person`): only the local name is kept.
    """
    value = discriminator.strip()
    parts = RE_TYPE_LOCAL.split(value)
    local = parts[-1] if parts and parts[-1] else value
    return resolve(local)


class IdentifierScope:
    """Identifiers already claimed inside one class."""

    def __init__(self):
        self._used: Dict[str, int] = {}

    def claim(self, raw_key: str) -> str:
        base = resolve(raw_key)
        if base not in self._used:
            self._used[base] = 1
            return base
        n = self._used[base]
        while True:
            n += 1
            candidate = f"{base}_{n}"
            if candidate not in self._used:
                break
        self._used[base] = n
        self._used[candidate] = 1
        return candidate
