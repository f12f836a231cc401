from slowapi import Limiter
from slowapi.util import get_remote_address
from scrolljob.config import settings

# Applied to every route through SlowAPIMiddleware; disabled during testing
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.RATE_LIMIT],
    enabled=not settings.TESTING,
)
