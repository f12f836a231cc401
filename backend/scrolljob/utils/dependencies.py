from fastapi import Depends, Query
from scrolljob.config import settings
from scrolljob.services.job_service import JobService
from scrolljob.services.news_service import NewsService
from scrolljob.services.resource_store import JobStore, NewsStore
from scrolljob.utils.exceptions import ValidationError
from scrolljob.utils.pagination import Pagination

# MongoDB encodes skip as a signed 64-bit integer
MAX_SKIP = 2 ** 63 - 1

def get_job_store() -> JobStore:
    return JobStore()

def get_news_store() -> NewsStore:
    return NewsStore()

def get_job_service(store: JobStore = Depends(get_job_store)) -> JobService:
    return JobService(store)

def get_news_service(store: NewsStore = Depends(get_news_store)) -> NewsService:
    return NewsService(store)

def get_pagination(
    page: int = Query(1, ge=1, description="Page number, starting at 1"),
    limit: int = Query(settings.DEFAULT_PAGE_LIMIT, ge=1, le=settings.MAX_PAGE_LIMIT, description="Items per page")
) -> Pagination:
    pagination = Pagination(page=page, limit=limit)
    if pagination.skip > MAX_SKIP:
        raise ValidationError("Page is out of range")
    return pagination
