import re
from datetime import datetime, timezone
from beanie import Document, Replace, Save, SaveChanges, before_event
from pydantic import Field

URL_PATTERN = re.compile(r"^https?://.+")

def utcnow() -> datetime:
    return datetime.now(timezone.utc)

def strip_text(value):
    """Trims surrounding whitespace from text fields before validation."""
    if isinstance(value, str):
        return value.strip()
    return value

class TimestampedDocument(Document):
    """Document with store-managed created/updated timestamps"""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @before_event(Replace, Save, SaveChanges)
    def touch(self):
        self.updated_at = utcnow()
