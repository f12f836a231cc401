from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

class PaginationMeta(BaseModel):
    """Pagination metadata for list responses"""
    results: int
    total: int
    page: int
    pages: int

class Envelope(BaseModel, Generic[T]):
    """Uniform response wrapper used by every endpoint"""
    status: str = "success"
    message: str
    data: Optional[T] = None
    meta: Optional[PaginationMeta] = None
