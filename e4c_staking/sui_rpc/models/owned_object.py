from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class OwnedObject(BaseModel):
    """Snapshot of an object owned by an address, as returned by ``suix_getOwnedObjects``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    object_id: str = Field(alias="objectId")
    object_type: Optional[str] = Field(default=None, alias="type", description="Move type tag")
    version: Optional[str] = Field(default=None)
    digest: Optional[str] = Field(default=None)
    fields: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def unwrap_content_fields(cls, data):
        # Move objects carry their fields under content.fields
        if isinstance(data, dict) and "content" in data:
            data = dict(data)
            content = data.pop("content") or {}
            data.setdefault("fields", content.get("fields") or {})
        return data

    @property
    def balance(self) -> Optional[int]:
        """Coin balance read from the content fields, None when the object has no numeric balance."""
        value = self.fields.get("balance")
        if isinstance(value, bool):
            return None
        try:
            return int(value)
        except (TypeError, ValueError):
            return None
