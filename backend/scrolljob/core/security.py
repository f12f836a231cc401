import secrets
from fastapi import Depends, Request
from scrolljob.config import Settings, get_settings
from scrolljob.utils.exceptions import UnauthorizedError
from scrolljob.utils.logger import auth_logger

def require_admin_key(request: Request, settings: Settings = Depends(get_settings)) -> None:
    """
    Shared-secret gate for mutating routes.

    With no ADMIN_KEY configured every request passes (open mode, warned about
    at startup). Otherwise the configured header must match the key exactly.
    """
    if not settings.gate_enabled:
        return

    admin_key = request.headers.get(settings.ADMIN_KEY_HEADER)
    if not admin_key or not secrets.compare_digest(admin_key.encode(), settings.ADMIN_KEY.encode()):
        auth_logger.warning("Unauthorized access attempt", extra={"context": {
            "ip": request.client.host if request.client else None,
            "path": request.url.path,
        }})
        raise UnauthorizedError()
