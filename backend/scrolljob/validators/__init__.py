from .common import validate_update_status
from .job import validate_create_job
from .news import validate_create_news

__all__ = ["validate_create_job", "validate_create_news", "validate_update_status"]
