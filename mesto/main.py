"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mesto.api import auth, cards, users
from mesto.api.dependencies import get_current_user_id
from mesto.api.error_handlers import PAGE_NOT_FOUND_MESSAGE, register_error_handlers
from mesto.config import get_settings
from mesto.errors import NotFoundError
from mesto.logging_config import configure_logging, log_requests

settings = get_settings()

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Mesto API starting ({settings.environment})")
    yield
    logger.info("Mesto API stopped")


app = FastAPI(
    title="Mesto API",
    description="Photo-sharing backend: user accounts, bearer-token auth and cards with likes",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "HEAD", "PUT", "PATCH", "POST", "DELETE"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

register_error_handlers(app)

# Public routes
app.include_router(auth.router)

# Routes behind the bearer-token gate
app.include_router(users.router)
app.include_router(cards.router)


@app.get("/health", dependencies=[Depends(get_current_user_id)])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


# Registered last: anything no other route matched, still behind the gate
@app.api_route(
    "/{path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    dependencies=[Depends(get_current_user_id)],
    include_in_schema=False,
)
async def page_not_found(path: str):
    raise NotFoundError(PAGE_NOT_FOUND_MESSAGE)
