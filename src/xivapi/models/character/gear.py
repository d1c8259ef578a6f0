"""Equipped gear models."""

from collections.abc import Iterator

from pydantic import Field, field_validator

from xivapi.models.base import U8, U16, U32, XIVModel


class GearPiece(XIVModel):
    """The item equipped in one gear slot."""

    id: U32 = Field(..., alias="ID", description="Item ID")
    creator: str | None = Field(None, description="Crafter signature")
    dye: U32 | None = Field(None, description="Stain ID")
    materia: list[U32] = Field(..., description="Melded materia item IDs")
    mirage: U32 | None = Field(None, description="Glamour item ID")


class Gear(XIVModel):
    """Twelve equipment slots; an unequipped slot is absent."""

    body: GearPiece | None = None
    bracelets: GearPiece | None = None
    earrings: GearPiece | None = None
    feet: GearPiece | None = None
    hands: GearPiece | None = None
    head: GearPiece | None = None
    legs: GearPiece | None = None
    main_hand: GearPiece | None = None
    necklace: GearPiece | None = None
    off_hand: GearPiece | None = None
    ring1: GearPiece | None = None
    ring2: GearPiece | None = None

    def equipped(self) -> Iterator[tuple[str, GearPiece]]:
        """Yield `(slot, piece)` for every occupied slot, in declaration order."""
        for slot in type(self).model_fields:
            piece = getattr(self, slot)
            if piece is not None:
                yield slot, piece


class GearSet(XIVModel):
    """Snapshot of the gear set a character was last seen wearing."""

    attributes: dict[U16, U32] = Field(..., description="Attribute ID to total value")
    class_id: U8 = Field(..., alias="ClassID")
    job_id: U8 = Field(..., alias="JobID")
    level: U8
    gear: Gear
    gear_key: str = Field(..., description="Key identifying this class/job gear set")

    @field_validator("attributes", mode="before")
    @classmethod
    def parse_attribute_keys(cls, v: object) -> object:
        """JSON object keys are strings; read them back as attribute IDs."""
        if not isinstance(v, dict):
            return v
        try:
            return {int(k) if isinstance(k, str) else k: value for k, value in v.items()}
        except ValueError as e:
            raise ValueError(f"attribute key is not an integer: {e}") from e
