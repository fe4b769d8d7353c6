"""Base models for ProjectBoard."""

from pydantic import BaseModel, ConfigDict


class ProjectBoardBaseModel(BaseModel):
    """Base model for records read from the store or returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )


class ProjectBoardRequestModel(BaseModel):
    """Base model for request bodies.

    Unknown keys are ignored so that a full record (including ``id``) can be
    sent back as an update body.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )
