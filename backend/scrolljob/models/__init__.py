# Beanie document models registered in init_beanie
from .job import Job, JobFields, JOB_STATUSES, JOB_REMOVED_STATUS
from .job_news import JobNews, NewsFields, NEWS_STATUSES, NEWS_REMOVED_STATUS

DOCUMENT_MODELS = [Job, JobNews]

__all__ = [
    "Job", "JobFields", "JOB_STATUSES", "JOB_REMOVED_STATUS",
    "JobNews", "NewsFields", "NEWS_STATUSES", "NEWS_REMOVED_STATUS",
    "DOCUMENT_MODELS",
]
