import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from formapi.config import GlobalConfig, get_config
from formapi.database import FormDataGateway, build_gateway
from formapi.errors import register_exception_handlers
from formapi.logging_conf import configure_logging
from formapi.routers.formdata import router as formdata_router

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[GlobalConfig] = None,
    gateway: Optional[FormDataGateway] = None,
) -> FastAPI:
    """Build the service.

    When no gateway is given, one is created from ``config`` on startup and
    closed on shutdown. A supplied gateway is used as-is and left open.
    """
    config = config or get_config()
    configure_logging(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        owned = None
        if app.state.gateway is None:
            owned = app.state.gateway = build_gateway(config)
            try:
                await owned.ping()
                logger.info("MongoDB is reachable.")
            except PyMongoError as e:
                logger.error(f"MongoDB ping failed: {e}")
        yield
        if owned is not None:
            await owned.close()
            app.state.gateway = None

    app = FastAPI(
        title="Form Data API",
        description="API for storing form submissions",
        debug=config.DEBUG,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.gateway = gateway

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, debug=config.DEBUG)
    app.include_router(formdata_router, prefix="/api/formdata", tags=["FormData"])
    return app


app = create_app()
