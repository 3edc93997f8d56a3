"""Zone reference domain entity."""

from typing import ClassVar, Self

from pydantic import Field

from cloudflare_entities.entities._base import Entity, FieldMap, WireField


class Zone(Entity):
    """Minimal reference to a zone, as embedded in other resources.

    Wire shape: ``{"name": "example.com"}``
    """

    name: str | None = Field(default=None, description="The domain name")

    def get_name(self) -> str | None:
        """Get the domain name."""
        return self.name

    def set_name(self, name: str | None) -> Self:
        """Set the domain name."""
        self.name = name
        return self

    field_map: ClassVar[FieldMap] = FieldMap(
        WireField("name", "name", get_name, set_name),
    )
