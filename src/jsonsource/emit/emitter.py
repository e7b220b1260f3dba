# src/jsonsource/emit/emitter.py
from __future__ import annotations
from typing import Dict, Iterator, List, Optional, Tuple
import json
import keyword
import logging
import re

from pydantic import BaseModel

from ..errors import InvalidNameError, TypeCollisionError
from ..infer.registry import TypeRegistry
from ..infer.schema import (
    ArrayKind, ArrayNode, FieldDecl, ObjectNode,
    ReferenceNode, ScalarKind, ScalarNode, TypeNode,
)
from . import templates as T

logger = logging.getLogger("jsonsource.emit")

_SCALAR_SLOTS = {
    ScalarKind.STRING: T.SCALAR_STRING,
    ScalarKind.NUMBER: T.SCALAR_NUMBER,
    ScalarKind.BOOLEAN: T.SCALAR_BOOLEAN,
}

_ARRAY_SLOTS = {
    ArrayKind.STRING: T.ARRAY_STRING,
    ArrayKind.NUMBER: T.ARRAY_NUMBER,
}


class GeneratedSource(BaseModel):
    namespace: str
    class_name: str
    file_name: str
    entry_point: str
    declarations: Dict[str, str]
    text: str


class ClassBlock:
    """One class declaration: name, docstring, optional discriminator comment, fields."""

    def __init__(self, name: str, fields: List[FieldDecl], doc: str,
                 discriminators: Optional[List[str]] = None, entry_point: bool = False):
        self.name = name
        self.fields = fields
        self.doc = doc
        self.discriminators = discriminators or []
        self.entry_point = entry_point

    def render_entry_point(self) -> str:
        return T.ENTRY_POINT.format(name=self.name) if self.entry_point else ""

    def render(self) -> str:
        comment = "".join(
            T.DISCRIMINATOR_COMMENT.format(value=json.dumps(d)) for d in self.discriminators)
        text = T.CLASS.format(
            name=self.name,
            doc=self.doc,
            comment=comment,
            fields="".join(render_field(f) for f in self.fields),
            entry_point=self.render_entry_point(),
        )
        return text.rstrip("\n") + "\n"


def annotation_for(node: TypeNode) -> Tuple[str, str]:
    """(annotation, default) del campo per un TypeNode."""
    if isinstance(node, ScalarNode):
        return _SCALAR_SLOTS[node.kind]
    if isinstance(node, ArrayNode):
        if node.element not in _ARRAY_SLOTS:
            raise ValueError("unsupported arrays are never declared")
        return _ARRAY_SLOTS[node.element]
    if isinstance(node, ObjectNode):
        name = node.name
    elif isinstance(node, ReferenceNode):
        name = node.type_name
    else:
        raise TypeError(f"unknown type node {node!r}")
    annotation, default = T.CLASS_REF
    return annotation.format(name=name), default


def render_field(field: FieldDecl) -> str:
    annotation, default = annotation_for(field.type)
    return T.FIELD.format(
        identifier=field.identifier,
        annotation=annotation,
        default=default,
        alias=json.dumps(field.key),
    )


def _inline_blocks(fields: List[FieldDecl]) -> Iterator[ClassBlock]:
    # pre-order, document order
    for f in fields:
        if isinstance(f.type, ObjectNode):
            yield ClassBlock(f.type.name, f.type.fields, T.DOC_INLINE)
            yield from _inline_blocks(f.type.fields)


def check_class_name(class_name: str) -> None:
    if not class_name.isidentifier() or keyword.iskeyword(class_name) or class_name.startswith("_"):
        raise InvalidNameError(f"'{class_name}' is not a valid class name")


def check_namespace(namespace: str) -> None:
    if not namespace:
        return
    for part in namespace.split("."):
        if not part.isidentifier() or keyword.iskeyword(part):
            raise InvalidNameError(f"'{namespace}' is not a valid module path")


def file_name_for(class_name: str) -> str:
    """`BookModel` -> `book_model.py`"""
    snake = re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', class_name).lower()
    return f"{snake}.py"


def emit(class_name: str, namespace: str, root_fields: List[FieldDecl],
         registry: TypeRegistry) -> GeneratedSource:
    """
    Renders the root class (with its `parse` entry point), the companion
    classes of inline objects and every registry entry, in this order:
    root, root companions, then each named type followed by its companions.
    """
    check_class_name(class_name)
    check_namespace(namespace)

    root = ClassBlock(class_name, root_fields, T.DOC_ROOT, entry_point=True)
    blocks: List[ClassBlock] = [root]
    blocks.extend(_inline_blocks(root_fields))
    for named in registry:
        blocks.append(ClassBlock(named.name, named.fields, T.DOC_NAMED, named.discriminators))
        blocks.extend(_inline_blocks(named.fields))

    declarations: Dict[str, str] = {}
    for block in blocks:
        if block.name in declarations:
            raise TypeCollisionError(block.name, "two generated classes share this name")
        declarations[block.name] = block.render().lstrip("\n")

    names = list(declarations)
    text = T.MODULE.format(
        namespace=namespace or "<none>",
        class_name=class_name,
        declarations="".join("\n\n" + d for d in declarations.values()),
        aliases="\n".join(T.ALIAS.format(name=n) for n in names),
        rebuilds="\n".join(T.REBUILD.format(name=n) for n in reversed(names)),
    )

    logger.info(f"emitted {class_name}: {len(names)} classes ({len(registry)} named types)")
    return GeneratedSource(
        namespace=namespace,
        class_name=class_name,
        file_name=file_name_for(class_name),
        entry_point=root.render_entry_point().strip("\n"),
        declarations=declarations,
        text=text,
    )
