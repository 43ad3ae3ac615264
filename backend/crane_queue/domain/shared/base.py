"""Base classes for domain value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for value objects (immutable, defined by their values)."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    def evolve(self, **changes):
        """Return a copy with ``changes`` applied; this instance is untouched."""
        return self.model_copy(update=changes)
