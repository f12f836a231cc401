from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from datetime import datetime

class JobCreate(BaseModel):
    """Job creation payload, kept untyped so validate_create_job sees raw values"""
    title: Optional[Any] = None
    company: Optional[Any] = None
    location: Optional[Any] = None
    apply_link: Optional[Any] = Field(None, alias="applyLink")

    class Config:
        populate_by_name = True

class JobStatusUpdate(BaseModel):
    status: Optional[Any] = None

class JobResponse(BaseModel):
    id: str
    title: str
    company: str
    location: str
    apply_link: str
    status: str
    created_at: datetime
    updated_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, value):
        return str(value)

    class Config:
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel
