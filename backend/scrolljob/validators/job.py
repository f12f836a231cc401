from typing import Any, List
from scrolljob.validators.common import check_text, raise_if_errors

def validate_create_job(title: Any, company: Any, location: Any, apply_link: Any) -> None:
    errors: List[str] = []

    check_text(errors, title, "Title", 200, required=True)
    check_text(errors, company, "Company name", 100, required=True)
    check_text(errors, location, "Location", 100)
    check_text(errors, apply_link, "Apply link", 500, required=True, url=True)

    raise_if_errors(errors)
