from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Literal, Optional, Union


class ScalarKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"


class ArrayKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    UNSUPPORTED = "unsupported"


class ScalarNode(BaseModel):
    node: Literal["scalar"] = "scalar"
    kind: ScalarKind


class ArrayNode(BaseModel):
    node: Literal["array"] = "array"
    element: ArrayKind

    @property
    def supported(self) -> bool:
        return self.element != ArrayKind.UNSUPPORTED


class ObjectNode(BaseModel):
    """Nested object without discriminator: emitted as a companion class."""
    node: Literal["object"] = "object"
    name: str
    fields: List["FieldDecl"] = []


class ReferenceNode(BaseModel):
    node: Literal["reference"] = "reference"
    type_name: str


TypeNode = Union[ScalarNode, ArrayNode, ObjectNode, ReferenceNode]


class FieldDecl(BaseModel):
    key: str                # chiave JSON originale
    identifier: str
    type: TypeNode = Field(discriminator="node")


class NamedType(BaseModel):
    name: str
    fields: List[FieldDecl] = []
    discriminators: List[str] = []


class InferenceResult(BaseModel):
    fields: List[FieldDecl] = []
    discovered: List[NamedType] = []
    hoisted: Optional[str] = None   # nome del tipo se l'oggetto è stato promosso


ObjectNode.model_rebuild()
FieldDecl.model_rebuild()
NamedType.model_rebuild()
InferenceResult.model_rebuild()
