from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Any, Optional
from datetime import datetime

class NewsCreate(BaseModel):
    """News creation payload, kept untyped so validate_create_news sees raw values"""
    title: Optional[Any] = None
    summary: Optional[Any] = None
    source_link: Optional[Any] = Field(None, alias="sourceLink")

    class Config:
        populate_by_name = True

class NewsStatusUpdate(BaseModel):
    status: Optional[Any] = None

class NewsResponse(BaseModel):
    id: str
    title: str
    summary: str
    source_link: Optional[str] = None
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
