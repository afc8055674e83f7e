"""Base model shared by the artifact-transport models."""

from pydantic import BaseModel, ConfigDict


class TransportBaseModel(BaseModel):
    """
    Strict pydantic base for transport models.

    Unknown fields are rejected, so typos in the configuration file surface
    as validation errors. Assignments are validated too, which keeps
    Resource names normalized when a transfer fills in metadata.
    """

    model_config = ConfigDict(extra="forbid", frozen=False, validate_assignment=True)


__all__ = ["TransportBaseModel"]
