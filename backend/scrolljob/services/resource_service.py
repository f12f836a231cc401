from abc import ABC, abstractmethod
from typing import Any, Dict, List, Sequence, Tuple
from scrolljob.services.lifecycle import soft_delete_transition
from scrolljob.services.resource_store import ResourceStore
from scrolljob.utils.logger import app_logger
from scrolljob.utils.pagination import Pagination
from scrolljob.validators import validate_update_status

class ResourceService(ABC):
    """
    Create / list / get / update-status / soft-delete workflow shared by the
    job and news resources. Subclasses supply the field set and statuses.
    """
    entity_name: str = "Resource"
    log_id_key: str = "id"
    allowed_statuses: Sequence[str] = ()
    removed_status: str = ""
    default_status: str = "active"

    def __init__(self, store: ResourceStore):
        self.store = store

    @abstractmethod
    def validate_create(self, payload: Dict[str, Any]) -> None:
        """Raises ValidationError listing every violated field rule."""

    def create_log_context(self, entity) -> Dict[str, Any]:
        return {self.log_id_key: str(entity.id)}

    async def create(self, payload: Dict[str, Any]):
        self.validate_create(payload)

        entity = await self.store.create(payload)
        app_logger.info(f"{self.entity_name} created", extra={"context": self.create_log_context(entity)})
        return entity

    async def list(self, pagination: Pagination, **filters) -> Tuple[List[Any], Dict[str, int]]:
        filters.setdefault("status", self.default_status)
        query = self.store.build_filters(**filters)

        items, total = await self.store.find(query, limit=pagination.limit, skip=pagination.skip)
        return items, pagination.meta(len(items), total)

    async def get(self, entity_id: str):
        return await self.store.find_by_id(entity_id)

    async def update_status(self, entity_id: str, status: Any):
        validate_update_status(status, self.allowed_statuses)

        entity = await self.store.update(entity_id, {"status": status})
        app_logger.info(
            f"{self.entity_name} status updated",
            extra={"context": {self.log_id_key: str(entity.id), "newStatus": status}}
        )
        return entity

    async def delete(self, entity_id: str) -> None:
        entity = await self.store.find_by_id(entity_id)

        next_status = soft_delete_transition(entity.status, self.removed_status)
        if next_status is not None:
            await self.store.apply_changes(entity, {"status": next_status})
            app_logger.info(f"{self.entity_name} deleted", extra={"context": {self.log_id_key: str(entity.id)}})
        return None
