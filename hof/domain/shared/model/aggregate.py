from pydantic import BaseModel, ConfigDict


class Aggregate(BaseModel):
    """Base for entities owned by a single port (e.g. a store)."""

    model_config = ConfigDict(frozen=True)
