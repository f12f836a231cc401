"""
Persistence adapters over the jobs / job_news collections.

Each store wraps one beanie document class. Services receive a store through
a FastAPI dependency, so tests swap in an in-memory double with the same
contract.
"""

import re
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type
from beanie import Document, PydanticObjectId
from bson import ObjectId
from pydantic import BaseModel
from scrolljob.models.job import Job, JobFields
from scrolljob.models.job_news import JobNews, NewsFields
from scrolljob.utils.exceptions import InvalidIdentifierError, NotFoundError

# newest first
DEFAULT_SORT = ("-created_at",)

class ResourceStore:
    document_model: Type[Document]
    fields_model: Type[BaseModel]
    resource_name: str = "Resource"
    invalid_id_message: Optional[str] = None

    def __init__(self, document_model: Optional[Type[Document]] = None):
        if document_model is not None:
            self.document_model = document_model

    async def create(self, fields: Dict[str, Any]) -> Document:
        """Normalises and validates the fields, then inserts a new document."""
        values = self.fields_model(**fields).model_dump()
        document = self.document_model(**values)
        await document.insert()
        return document

    async def find_by_id(self, entity_id: str) -> Document:
        if not ObjectId.is_valid(entity_id):
            raise InvalidIdentifierError(self.resource_name, self.invalid_id_message)

        document = await self.document_model.get(PydanticObjectId(entity_id))
        if document is None:
            raise NotFoundError(self.resource_name)
        return document

    async def find(
        self,
        filters: Dict[str, Any],
        sort: Optional[Sequence[str]] = None,
        limit: int = 50,
        skip: int = 0
    ) -> Tuple[List[Document], int]:
        """Returns one page of matches plus the total match count."""
        query = self.document_model.find(filters)
        documents = await query.sort(*(sort or DEFAULT_SORT)).skip(skip).limit(limit).to_list()
        total = await self.document_model.find(filters).count()
        return documents, total

    async def update(self, entity_id: str, fields: Dict[str, Any]) -> Document:
        document = await self.find_by_id(entity_id)
        return await self.apply_changes(document, fields)

    async def apply_changes(self, document: Document, fields: Dict[str, Any]) -> Document:
        """Saves field changes on an already loaded document (last write wins)."""
        for name, value in fields.items():
            setattr(document, name, value)
        await document.save()
        return document

class JobStore(ResourceStore):
    document_model = Job
    fields_model = JobFields
    resource_name = "Job"
    invalid_id_message = "Invalid job ID"

    @staticmethod
    def build_filters(
        status: Optional[str] = None,
        company: Optional[str] = None,
        search: Optional[str] = None
    ) -> Dict[str, Any]:
        filters: Dict[str, Any] = {}
        if status:
            filters["status"] = status
        if company:
            # case-insensitive substring, not a user supplied pattern
            filters["company"] = {"$regex": re.escape(company), "$options": "i"}
        if search:
            filters["$text"] = {"$search": search}
        return filters

class NewsStore(ResourceStore):
    document_model = JobNews
    fields_model = NewsFields
    resource_name = "News item"
    invalid_id_message = "Invalid news ID"

    @staticmethod
    def build_filters(status: Optional[str] = None) -> Dict[str, Any]:
        return {"status": status} if status else {}
