# src/jsonsource/emit/templates.py
"""
Template del modulo generato, con slot nominati.

Everything imported by the generated module is aliased with a leading
underscore: inferred field names never start with "_", so a JSON key such as
"field" or "list" cannot shadow `_Field` or `_List` inside a class body.
Class references go through `_T_<Name>` aliases for the same reason (a field
`Author` holding an `Author` instance); the `_T_` prefix keeps a generated
class called `List` or `ValidationError` apart from the imports above.
Numbers are `Union[int, float]` so integers stay exact.
"""
from __future__ import annotations

MODULE = """\
# Code generated by jsonsource from a sample JSON document. DO NOT EDIT.
# module: {namespace}
# root: {class_name}
from typing import List as _List, Optional as _Optional, Union as _Union

from pydantic import BaseModel as _BaseModel
from pydantic import ConfigDict as _ConfigDict
from pydantic import Field as _Field
from pydantic import ValidationError as _ValidationError
{declarations}

{aliases}

{rebuilds}
"""

CLASS = """\


class {name}(_BaseModel):
    \"\"\"{doc}\"\"\"
{comment}    model_config = _ConfigDict(populate_by_name=True)

{fields}{entry_point}"""

ENTRY_POINT = """\

    @classmethod
    def parse(cls, json: str) -> "_Optional[{name}]":
        try:
            return cls.model_validate_json(json)
        except _ValidationError:
            return None
"""

DISCRIMINATOR_COMMENT = "    # @type: {value}\n"

FIELD = "    {identifier}: {annotation} = _Field({default}, alias={alias})\n"

ALIAS = "_T_{name} = {name}"

REBUILD = "{name}.model_rebuild()"

# annotazione e default per ogni forma di campo
SCALAR_STRING = ("str", 'default=""')
SCALAR_NUMBER = ("_Union[int, float]", "default=0")
SCALAR_BOOLEAN = ("bool", "default=False")
ARRAY_STRING = ("_List[str]", "default_factory=list")
ARRAY_NUMBER = ("_List[_Union[int, float]]", "default_factory=list")
CLASS_REF = ('_Optional["_T_{name}"]', "default=None")

DOC_ROOT = "Generated root class."
DOC_NAMED = "Generated class."
DOC_INLINE = "Generated class for a nested object."
