"""
Pydantic models for labels.
"""

from pydantic import BaseModel, ConfigDict, Field

LABEL_NAME_MAX_LENGTH = 100


class LabelEntity(BaseModel):
    """A label as returned by the repositories"""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class CreateLabel(BaseModel):
    """Model for creating a new label"""
    name: str = Field(..., min_length=1, max_length=LABEL_NAME_MAX_LENGTH)
