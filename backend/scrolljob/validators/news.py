from typing import Any, List
from scrolljob.validators.common import check_text, raise_if_errors

def validate_create_news(title: Any, summary: Any, source_link: Any) -> None:
    errors: List[str] = []

    check_text(errors, title, "Title", 300, required=True)
    check_text(errors, summary, "Summary", 1000, required=True)
    check_text(errors, source_link, "Source link", 500, url=True)

    raise_if_errors(errors)
