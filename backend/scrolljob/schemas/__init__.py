# Shared
from .common import Envelope, PaginationMeta

# Job listings
from .job import JobCreate, JobStatusUpdate, JobResponse

# Job news
from .job_news import NewsCreate, NewsStatusUpdate, NewsResponse

__all__ = [
    "Envelope", "PaginationMeta",
    "JobCreate", "JobStatusUpdate", "JobResponse",
    "NewsCreate", "NewsStatusUpdate", "NewsResponse",
]
