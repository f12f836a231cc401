from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from slowapi.middleware import SlowAPIMiddleware
from scrolljob.config import settings
from scrolljob.core.rate_limit import limiter
from scrolljob.database.mongo import init_mongo, close_mongo
from scrolljob.routers import health, jobs, news
from scrolljob.utils.exceptions import register_exception_handlers
from scrolljob.utils.logger import app_logger

# Connect MongoDB on startup, close it on shutdown
@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.gate_enabled:
        app_logger.warning("ADMIN_KEY is not set. Admin routes will be unprotected.")

    app.state.mongo_client = await init_mongo()
    app_logger.info("Server started successfully", extra={"context": {
        "port": settings.PORT,
        "env": settings.ENVIRONMENT,
        "auth": "enabled" if settings.gate_enabled else "disabled",
        "allowedOrigins": settings.CORS_ORIGINS or ["*"],
    }})
    yield
    await close_mongo(app.state.mongo_client)
    app_logger.info("Server shut down")

app = FastAPI(
    title="ScrollJob API",
    version="1.0.0",
    lifespan=lifespan
)

# Rate limiting (default limit from settings.RATE_LIMIT)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

# CORS: every origin in development, the FRONTEND_URL whitelist otherwise
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if settings.is_development else settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.is_development:
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        app_logger.info(f"{request.method} {request.url.path}")
        return await call_next(request)

register_exception_handlers(app)

# Routers
app.include_router(health.router)
app.include_router(jobs.router, prefix=settings.API_PREFIX)
app.include_router(news.router, prefix=settings.API_PREFIX)
