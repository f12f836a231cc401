from typing import Literal, Optional, get_args
import pymongo
from pydantic import BaseModel, Field, field_validator
from pymongo import IndexModel
from scrolljob.models.base import TimestampedDocument, strip_text

NewsStatus = Literal["active", "archived"]
NEWS_STATUSES = list(get_args(NewsStatus))
NEWS_REMOVED_STATUS = "archived"

class NewsFields(BaseModel):
    """Stored news fields with their write-time normalisation"""
    title: str = Field(..., min_length=1, max_length=300, description="News title")
    summary: str = Field(..., min_length=1, max_length=1000, description="News summary")
    source_link: Optional[str] = Field(None, max_length=500, pattern=r"^https?://.+", description="Source URL")
    status: NewsStatus = "active"

    @field_validator("title", "summary", mode="before")
    @classmethod
    def trim(cls, value):
        return strip_text(value)

    @field_validator("source_link", mode="before")
    @classmethod
    def trim_link(cls, value):
        # blank links are stored as absent
        return strip_text(value) or None

class JobNews(TimestampedDocument, NewsFields):
    class Settings:
        name = "job_news"
        validate_on_save = True
        indexes = [
            IndexModel([("created_at", pymongo.DESCENDING)]),
            IndexModel([("status", pymongo.ASCENDING)]),
        ]
