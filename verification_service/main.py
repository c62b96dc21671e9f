from contextlib import asynccontextmanager

from fastapi import FastAPI

from verification_service.infrastructure.redis_cache.pool import close_redis, get_redis
from verification_service.logging import setup_logging
from verification_service.presentation.api import api
from verification_service.settings import get_settings

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup
    get_redis()

    try:
        yield
    finally:
        # shutdown
        await close_redis()


def create_app() -> FastAPI:
    setup_logging(settings.log_level)
    app = FastAPI(
        title="Static Verification Code API", version="0.1.0", lifespan=lifespan
    )
    app.state.settings = settings
    app.include_router(api)
    return app


app = create_app()
