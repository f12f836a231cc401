from fastapi import APIRouter, Depends, Query, status
from typing import List
from scrolljob.core.security import require_admin_key
from scrolljob.schemas.common import Envelope
from scrolljob.schemas.job_news import NewsCreate, NewsResponse, NewsStatusUpdate
from scrolljob.services.news_service import NewsService
from scrolljob.utils.dependencies import get_news_service, get_pagination
from scrolljob.utils.pagination import Pagination

router = APIRouter(prefix="/news", tags=["news"])

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[NewsResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Create a news item",
    description="""
Creates a job news item (admin only).

- `title` and `summary` are required.
- `sourceLink` is optional but must be an http(s) URL when given.
"""
)
async def create_news(payload: NewsCreate, service: NewsService = Depends(get_news_service)):
    news = await service.create(payload.model_dump())
    return {
        "status": "success",
        "message": "News created successfully",
        "data": NewsResponse.model_validate(news),
    }

@router.get(
    "",
    response_model=Envelope[List[NewsResponse]],
    response_model_exclude_unset=True,
    summary="List news items",
    description="Returns news newest first with pagination metadata. `status` defaults to `active`."
)
async def list_news(
    pagination: Pagination = Depends(get_pagination),
    news_status: str = Query("active", alias="status", description="News status filter"),
    service: NewsService = Depends(get_news_service)
):
    items, meta = await service.list(pagination, status=news_status)
    return {
        "status": "success",
        "message": "News fetched successfully",
        "meta": meta,
        "data": [NewsResponse.model_validate(news) for news in items],
    }

@router.get(
    "/{news_id}",
    response_model=Envelope[NewsResponse],
    response_model_exclude_unset=True,
    summary="Get a news item"
)
async def get_news(news_id: str, service: NewsService = Depends(get_news_service)):
    news = await service.get(news_id)
    return {
        "status": "success",
        "message": "News fetched successfully",
        "data": NewsResponse.model_validate(news),
    }

@router.patch(
    "/{news_id}",
    response_model=Envelope[NewsResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Update news status",
    description="Sets the status to `active` or `archived` (admin only)."
)
async def update_news_status(
    news_id: str,
    payload: NewsStatusUpdate,
    service: NewsService = Depends(get_news_service)
):
    news = await service.update_status(news_id, payload.status)
    return {
        "status": "success",
        "message": "News status updated successfully",
        "data": NewsResponse.model_validate(news),
    }

@router.delete(
    "/{news_id}",
    response_model=Envelope[NewsResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Delete a news item",
    description="Soft delete: the item is archived, never removed. Deleting an archived item is a no-op."
)
async def delete_news(news_id: str, service: NewsService = Depends(get_news_service)):
    await service.delete(news_id)
    return {
        "status": "success",
        "message": "News deleted successfully",
        "data": None,
    }
