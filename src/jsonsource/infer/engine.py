# src/jsonsource/infer/engine.py
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import logging

from ..errors import DocumentTooDeepError, UnsupportedRootError
from .arrays import resolve_array
from .kinds import ValueKind, classify
from .naming import IdentifierScope, resolve_type_name
from .registry import TypeRegistry
from .schema import (
    FieldDecl, InferenceResult, NamedType, ObjectNode,
    ReferenceNode, ScalarKind, ScalarNode, TypeNode,
)

logger = logging.getLogger("jsonsource.infer")

_SCALARS = {
    ValueKind.STRING: ScalarKind.STRING,
    ValueKind.NUMBER: ScalarKind.NUMBER,
    ValueKind.TRUE: ScalarKind.BOOLEAN,
    ValueKind.FALSE: ScalarKind.BOOLEAN,
}


class SchemaInferrer:
    """
    Walks a decoded JSON object and infers its field declarations.

    Ogni chiamata restituisce la coppia esplicita (fields, discovered): i tipi
    scoperti nei sotto-oggetti risalgono al chiamante, nessun buffer condiviso.

    A non-root object carrying a string `discriminator_key` (default `@type`)
    is hoisted: all of its properties, whatever their position relative to
    the discriminator, go into a NamedType and the parent only gets a
    reference to it.
    """

    def __init__(self, discriminator_key: str = "@type", max_depth: int = 64):
        self.discriminator_key = discriminator_key
        self.max_depth = max_depth

    def discriminator_of(self, obj: Dict[str, Any]) -> Optional[str]:
        value = obj.get(self.discriminator_key)
        if isinstance(value, str) and value.strip():
            return value
        return None

    def infer_object(self, parent_name: str, obj: Dict[str, Any],
                     owner: str, depth: int = 0) -> InferenceResult:
        if depth > self.max_depth:
            raise DocumentTooDeepError(
                f"object nesting exceeds max_depth={self.max_depth} at '{owner}'")

        discriminator = self.discriminator_of(obj) if parent_name else None
        type_name = resolve_type_name(discriminator) if discriminator else None
        fields_owner = type_name or owner

        scope = IdentifierScope()
        fields: List[FieldDecl] = []
        nested: List[NamedType] = []

        for key, value in obj.items():
            identifier = scope.claim(key)
            node = self._infer_value(key, identifier, value, fields_owner, depth, nested)
            if node is None:
                continue
            fields.append(FieldDecl(key=key, identifier=identifier, type=node))

        if type_name is None:
            return InferenceResult(fields=fields, discovered=nested)

        logger.info(f"hoisted '{parent_name}' into type {type_name} ({discriminator}, {len(fields)} fields)")
        named = NamedType(name=type_name, fields=fields, discriminators=[discriminator])
        # il tipo padre precede quelli scoperti nei suoi figli
        return InferenceResult(fields=[], discovered=[named] + nested, hoisted=type_name)

    def _infer_value(self, key: str, identifier: str, value: Any, owner: str,
                     depth: int, nested: List[NamedType]) -> Optional[TypeNode]:
        kind = classify(value)

        if kind in _SCALARS:
            return ScalarNode(kind=_SCALARS[kind])

        if kind == ValueKind.ARRAY:
            array = resolve_array(identifier, value)
            return array if array.supported else None

        if kind == ValueKind.OBJECT:
            child_name = f"{owner}{identifier}"
            child = self.infer_object(identifier, value, owner=child_name, depth=depth + 1)
            nested.extend(child.discovered)
            if child.hoisted:
                return ReferenceNode(type_name=child.hoisted)
            return ObjectNode(name=child_name, fields=child.fields)

        logger.debug(f"skip: {key} ({kind.value})")
        return None


def infer_document(document: Any, class_name: str, discriminator_key: str = "@type",
                   collision_policy: str = "reject",
                   max_depth: int = 64) -> Tuple[List[FieldDecl], TypeRegistry]:
    """
    Infers the root class fields and the registry of hoisted types.
    The root never hoists, even when it carries a discriminator.
    """
    if classify(document) != ValueKind.OBJECT:
        raise UnsupportedRootError(
            f"the sample document root must be a JSON object, got {classify(document).value}")

    inferrer = SchemaInferrer(discriminator_key=discriminator_key, max_depth=max_depth)
    result = inferrer.infer_object("", document, owner=class_name)

    registry = TypeRegistry(policy=collision_policy)
    for named in result.discovered:
        registry.register(named)

    return result.fields, registry
