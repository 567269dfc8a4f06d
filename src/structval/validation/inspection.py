"""Value inspection: classify runtime values into node kinds.

The traversal only ever looks at values through this module, so supporting a
new record flavour means teaching ``kind_of`` and ``iter_record_fields`` about
it and nothing else.
"""

import dataclasses
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel

VALIDATE_TAG = "validate"
JSON_TAG = "json"
OMITEMPTY_OPTION = "omitempty"


class NodeKind(str, Enum):
    """Closed set of node kinds the traversal understands."""
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    SCALAR = "scalar"


COMPOSITE_KINDS = {NodeKind.RECORD, NodeKind.SEQUENCE, NodeKind.MAPPING}


def field_tags(validate: str | None = None, json: str | None = None) -> dict[str, str]:
    """Field metadata carrying a constraint expression and/or a serialization tag.

    Use as ``dataclasses.field(metadata=field_tags(...))`` or
    ``pydantic.Field(json_schema_extra=field_tags(...))``.
    """
    tags = {}
    if validate is not None:
        tags[VALIDATE_TAG] = validate
    if json is not None:
        tags[JSON_TAG] = json
    return tags


@dataclass
class RecordField:
    """One exported field of a record value."""
    name: str
    value: Any
    validate: str | None = None
    json: str | None = None

    @property
    def constraint(self) -> str:
        """Inline constraint expression for this field.

        The declared ``validate`` tag wins; otherwise a ``json`` tag with the
        ``omitempty`` option reduces to the bare ``omitempty`` constraint.
        """
        if self.validate:
            return self.validate
        if self.json:
            options = self.json.split(",")[1:]
            if OMITEMPTY_OPTION in options:
                return OMITEMPTY_OPTION
        return ""


def is_record(value: Any) -> bool:
    if isinstance(value, BaseModel):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def kind_of(value: Any) -> NodeKind:
    if value is None:
        return NodeKind.NULL
    if is_record(value):
        return NodeKind.RECORD
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, bool):
        return NodeKind.SCALAR
    if isinstance(value, (int, float, Decimal)):
        return NodeKind.NUMBER
    if isinstance(value, Mapping):
        return NodeKind.MAPPING
    if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def is_empty(value: Any, kind: NodeKind) -> bool:
    """Emptiness as seen by the ``omitempty`` flag and must-groups."""
    if kind == NodeKind.NULL:
        return True
    if kind in (NodeKind.STRING, NodeKind.SEQUENCE, NodeKind.MAPPING):
        return len(value) == 0
    return False


def _tags(extra: Any) -> dict:
    return extra if isinstance(extra, dict) else {}


def iter_record_fields(record: Any) -> Iterator[RecordField]:
    """Yield exported fields in declaration order.

    Names starting with an underscore are treated as unexported and skipped.
    """
    if isinstance(record, BaseModel):
        for name, info in type(record).model_fields.items():
            if name.startswith("_"):
                continue
            tags = _tags(info.json_schema_extra)
            yield RecordField(name, getattr(record, name), tags.get(VALIDATE_TAG), tags.get(JSON_TAG))
        return

    for f in dataclasses.fields(record):
        if f.name.startswith("_"):
            continue
        yield RecordField(f.name, getattr(record, f.name), f.metadata.get(VALIDATE_TAG), f.metadata.get(JSON_TAG))


def iter_entries(value: Any, kind: NodeKind) -> Iterator[tuple[str | int, Any]]:
    """Yield (segment, child) pairs of a sequence or mapping."""
    if kind == NodeKind.MAPPING:
        for key, child in value.items():
            yield str(key), child
    else:
        for index, child in enumerate(value):
            yield index, child
