# src/jsonsource/infer/registry.py
from __future__ import annotations
from typing import Dict, Iterator, List, Optional
import logging

from ..errors import TypeCollisionError
from .schema import FieldDecl, NamedType, TypeNode

logger = logging.getLogger("jsonsource.infer")

POLICIES = ("reject", "merge")


class TypeRegistry:
    """
    Named types hoisted from discriminated objects, in first-discovery order.
    Ogni nome compare una sola volta; le collisioni seguono `policy`:
      - "reject": stesso nome con campi diversi (o da un altro valore @type) -> errore
      - "merge":  unione dei campi per chiave JSON, nell'ordine di prima apparizione
    """

    def __init__(self, policy: str = "reject"):
        if policy not in POLICIES:
            raise ValueError(f"unknown collision policy {policy!r}, expected one of {POLICIES}")
        self.policy = policy
        self._types: Dict[str, NamedType] = {}

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, name: str) -> bool:
        return name in self._types

    def __iter__(self) -> Iterator[NamedType]:
        return iter(self._types.values())

    def get(self, name: str) -> Optional[NamedType]:
        return self._types.get(name)

    def all(self) -> List[NamedType]:
        return list(self._types.values())

    def register(self, named: NamedType) -> NamedType:
        current = self._types.get(named.name)
        if current is None:
            self._types[named.name] = named.model_copy(deep=True)
            logger.debug(f"registered type {named.name} with {len(named.fields)} fields")
            return self._types[named.name]

        if self.policy == "merge":
            merged = _merge(current, named)
            self._types[named.name] = merged
            return merged

        foreign = [d for d in named.discriminators if d not in current.discriminators]
        if foreign:
            raise TypeCollisionError(
                named.name,
                f"discriminators {current.discriminators} and {foreign} resolve to the same class name",
            )
        # stesso insieme di campi anche se in ordine diverso: vale il primo ordine visto
        if _by_key(current.fields) != _by_key(named.fields):
            raise TypeCollisionError(
                named.name,
                f"field sets differ ({_keys(current.fields)} vs {_keys(named.fields)})",
            )
        return current


def _keys(fields: List[FieldDecl]) -> List[str]:
    return [f.key for f in fields]


def _by_key(fields: List[FieldDecl]) -> Dict[str, TypeNode]:
    return {f.key: f.type for f in fields}


def _merge(current: NamedType, incoming: NamedType) -> NamedType:
    fields = list(current.fields)
    by_key = {f.key: f for f in fields}
    used = {f.identifier for f in fields}

    for f in incoming.fields:
        existing = by_key.get(f.key)
        if existing is None:
            if f.identifier in used:
                raise TypeCollisionError(
                    current.name, f"merged field '{f.key}' clashes with identifier {f.identifier}")
            fields.append(f)
            by_key[f.key] = f
            used.add(f.identifier)
        elif existing.type != f.type:
            raise TypeCollisionError(
                current.name, f"field '{f.key}' has conflicting types when merging")

    discriminators = list(current.discriminators)
    for d in incoming.discriminators:
        if d not in discriminators:
            discriminators.append(d)

    logger.info(f"merged type {current.name}: {len(current.fields)} -> {len(fields)} fields")
    return NamedType(name=current.name, fields=fields, discriminators=discriminators)
