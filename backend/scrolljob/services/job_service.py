from typing import Any, Dict
from scrolljob.models.job import JOB_REMOVED_STATUS, JOB_STATUSES
from scrolljob.services.resource_service import ResourceService
from scrolljob.validators import validate_create_job

class JobService(ResourceService):
    entity_name = "Job"
    log_id_key = "jobId"
    allowed_statuses = JOB_STATUSES
    removed_status = JOB_REMOVED_STATUS

    def validate_create(self, payload: Dict[str, Any]) -> None:
        validate_create_job(
            payload.get("title"),
            payload.get("company"),
            payload.get("location"),
            payload.get("apply_link"),
        )

    def create_log_context(self, entity) -> Dict[str, Any]:
        return {"jobId": str(entity.id), "company": entity.company}
