from typing import Literal, get_args
import pymongo
from pydantic import BaseModel, Field, field_validator
from pymongo import IndexModel
from scrolljob.models.base import TimestampedDocument, strip_text

JobStatus = Literal["active", "expired", "closed"]
JOB_STATUSES = list(get_args(JobStatus))
JOB_REMOVED_STATUS = "closed"
DEFAULT_LOCATION = "Remote"

class JobFields(BaseModel):
    """Stored job fields with their write-time normalisation"""
    title: str = Field(..., min_length=1, max_length=200, description="Job title")
    company: str = Field(..., min_length=1, max_length=100, description="Company name, stored lowercase")
    location: str = Field(DEFAULT_LOCATION, max_length=100, description="Job location")
    apply_link: str = Field(..., max_length=500, pattern=r"^https?://.+", description="Application URL")
    status: JobStatus = "active"

    @field_validator("title", "apply_link", mode="before")
    @classmethod
    def trim(cls, value):
        return strip_text(value)

    @field_validator("company", mode="before")
    @classmethod
    def normalize_company(cls, value):
        value = strip_text(value)
        return value.lower() if isinstance(value, str) else value

    @field_validator("location", mode="before")
    @classmethod
    def default_location(cls, value):
        value = strip_text(value)
        return value or DEFAULT_LOCATION

class Job(TimestampedDocument, JobFields):
    class Settings:
        name = "jobs"
        validate_on_save = True
        indexes = [
            IndexModel([("created_at", pymongo.DESCENDING)]),
            IndexModel([("company", pymongo.ASCENDING)]),
            IndexModel([("status", pymongo.ASCENDING)]),
            IndexModel([("title", pymongo.TEXT), ("company", pymongo.TEXT)]),
        ]
