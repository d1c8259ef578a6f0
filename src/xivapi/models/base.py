"""Shared base model and wire helpers for XIVAPI data models."""

import json
import typing
from collections.abc import Sequence
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_pascal

from xivapi.utils.exceptions import ParseError, SchemaMismatch

# Fixed-width unsigned integers matching the value ranges XIVAPI returns.
U8 = Annotated[int, Field(ge=0, le=0xFF)]
U16 = Annotated[int, Field(ge=0, le=0xFFFF)]
U32 = Annotated[int, Field(ge=0, le=0xFFFF_FFFF)]
Percent = Annotated[int, Field(ge=0, le=100)]


class XIVModel(BaseModel):
    """Base for every XIVAPI response model.

    Wire names follow PascalCase (``FeastMatches``); fields whose upstream
    name breaks that rule (``ID``, ``DC``, ``ClassID``...) declare an
    explicit ``alias``. Unknown upstream fields are ignored. Validation is
    strict: a value of the wrong JSON type is rejected rather than coerced.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        strict=True,
    )

    @classmethod
    def from_wire(cls, payload: Any) -> Self:
        """Build the model from an already-decoded JSON value.

        Raises:
            SchemaMismatch: If a required field is missing or has the wrong type
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            error = e.errors()[0]
            raise SchemaMismatch(field_path(cls, error["loc"]), error["msg"]) from e

    @classmethod
    def from_json(cls, raw: str | bytes) -> Self:
        """Build the model from a raw JSON document.

        Raises:
            ParseError: If `raw` is not valid JSON
            SchemaMismatch: If the JSON does not match the model
        """
        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise ParseError(f"Response body is not valid JSON: {e}") from e
        return cls.from_wire(payload)

    def to_wire(self) -> dict[str, Any]:
        """Dump back to the upstream JSON shape.

        Only fields that were present when the model was built are emitted,
        so decoding then encoding reproduces the original document.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self) -> str:
        """Dump back to an upstream JSON document."""
        return self.model_dump_json(by_alias=True, exclude_unset=True)


def _nested_model(annotation: Any) -> type[BaseModel] | None:
    """Find the model class wrapped by an annotation such as `list[X] | None`."""
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    for arg in typing.get_args(annotation):
        found = _nested_model(arg)
        if found is not None:
            return found
    return None


def field_path(model: type[BaseModel], loc: Sequence[int | str]) -> str:
    """Translate a pydantic error location into a dotted attribute path.

    Wire aliases are mapped back to Python field names and list indices are
    rendered as ``[n]``, e.g. ``('Character', 'ClassJobs', 3, 'Level')``
    becomes ``character.class_jobs[3].level``.
    """
    path = ""
    current: type[BaseModel] | None = model
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
            continue
        if current is None:
            path = f"{path}.{part}" if path else part
            continue
        name, info = _lookup_field(current, part)
        if info is None:
            # Union tags and similar pydantic-internal segments.
            continue
        path = f"{path}.{name}" if path else name
        current = _nested_model(info.annotation)
    return path


def _lookup_field(model: type[BaseModel], key: str):
    for name, info in model.model_fields.items():
        if key in (name, info.alias):
            return name, info
    return key, None
