from typing import Any, Dict
from scrolljob.models.job_news import NEWS_REMOVED_STATUS, NEWS_STATUSES
from scrolljob.services.resource_service import ResourceService
from scrolljob.validators import validate_create_news

class NewsService(ResourceService):
    entity_name = "News"
    log_id_key = "newsId"
    allowed_statuses = NEWS_STATUSES
    removed_status = NEWS_REMOVED_STATUS

    def validate_create(self, payload: Dict[str, Any]) -> None:
        validate_create_news(
            payload.get("title"),
            payload.get("summary"),
            payload.get("source_link"),
        )
