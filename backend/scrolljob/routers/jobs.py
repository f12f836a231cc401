from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from scrolljob.core.security import require_admin_key
from scrolljob.schemas.common import Envelope
from scrolljob.schemas.job import JobCreate, JobResponse, JobStatusUpdate
from scrolljob.services.job_service import JobService
from scrolljob.utils.dependencies import get_job_service, get_pagination
from scrolljob.utils.pagination import Pagination

router = APIRouter(prefix="/jobs", tags=["jobs"])

@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[JobResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Create a job listing",
    description="""
Creates a job listing (admin only).

- `title`, `company` and `applyLink` are required; `location` defaults to `Remote`.
- `company` is stored trimmed and lowercased.
- Every violated rule is reported in one comma separated message.
"""
)
async def create_job(payload: JobCreate, service: JobService = Depends(get_job_service)):
    job = await service.create(payload.model_dump())
    return {
        "status": "success",
        "message": "Job created successfully",
        "data": JobResponse.model_validate(job),
    }

@router.get(
    "",
    response_model=Envelope[List[JobResponse]],
    response_model_exclude_unset=True,
    summary="List job listings",
    description="""
Returns job listings newest first with pagination metadata.

- `status` defaults to `active`.
- `company` matches a case-insensitive substring.
- `search` uses the text index over title and company.
"""
)
async def list_jobs(
    pagination: Pagination = Depends(get_pagination),
    company: Optional[str] = Query(None, description="Company name substring"),
    search: Optional[str] = Query(None, description="Full-text search over title and company"),
    job_status: str = Query("active", alias="status", description="Job status filter"),
    service: JobService = Depends(get_job_service)
):
    jobs, meta = await service.list(pagination, status=job_status, company=company, search=search)
    return {
        "status": "success",
        "message": "Jobs fetched successfully",
        "meta": meta,
        "data": [JobResponse.model_validate(job) for job in jobs],
    }

@router.get(
    "/{job_id}",
    response_model=Envelope[JobResponse],
    response_model_exclude_unset=True,
    summary="Get a job listing"
)
async def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    job = await service.get(job_id)
    return {
        "status": "success",
        "message": "Job fetched successfully",
        "data": JobResponse.model_validate(job),
    }

@router.patch(
    "/{job_id}",
    response_model=Envelope[JobResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Update job status",
    description="Sets the status to one of `active`, `expired`, `closed` (admin only)."
)
async def update_job_status(
    job_id: str,
    payload: JobStatusUpdate,
    service: JobService = Depends(get_job_service)
):
    job = await service.update_status(job_id, payload.status)
    return {
        "status": "success",
        "message": "Job status updated successfully",
        "data": JobResponse.model_validate(job),
    }

@router.delete(
    "/{job_id}",
    response_model=Envelope[JobResponse],
    response_model_exclude_unset=True,
    dependencies=[Depends(require_admin_key)],
    summary="Delete a job listing",
    description="Soft delete: the job is closed, never removed. Deleting a closed job is a no-op."
)
async def delete_job(job_id: str, service: JobService = Depends(get_job_service)):
    await service.delete(job_id)
    return {
        "status": "success",
        "message": "Job deleted successfully",
        "data": None,
    }
