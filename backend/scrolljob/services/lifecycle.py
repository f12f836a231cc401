from typing import Optional

def soft_delete_transition(current_status: str, removed_status: str) -> Optional[str]:
    """
    Status to write when deleting a resource, or None when it is already removed.

    Deletion never removes the document; it moves it to the terminal status
    (`closed` for jobs, `archived` for news). Repeating it is a no-op.
    """
    if current_status == removed_status:
        return None
    return removed_status
