"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Models are frozen; changes produce a new instance through ``evolve``.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def evolve(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied.

        Unlike ``model_copy(update=...)``, the copy is validated.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
