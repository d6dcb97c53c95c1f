"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are frozen: a fetched comment is a snapshot of its row, and the
    relations between comments live in the query result, not on the entity.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
