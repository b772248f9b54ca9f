"""
Simple Webserver - application factory
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .config import Settings
from .middleware.logging import RequestLoggerMiddleware
from .routes import register_routes
from .services.kubernetes import KubernetesPodLauncher, PodLauncher
from .services.storage import RedisStorage, Storage
from .version import NAME, __version__

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle"""
    logger.info(f"🚀 {NAME} v{__version__} ready (redis={app.state.settings.redis})")

    yield

    logger.info("🛑 Shutting down...")
    await app.state.storage.close()


def create_app(
    settings: Settings,
    storage: Optional[Storage] = None,
    pod_launcher: Optional[PodLauncher] = None,
) -> FastAPI:
    """
    Build the application.

    `settings` must already be resolved by the caller; the factory does not
    read the environment. The storage backend and pod launcher are created
    from it unless they are passed in, and live on app.state for the lifetime
    of the app.
    """
    if storage is None:
        storage = RedisStorage(settings.redis, timeout=settings.redis_timeout)
    if pod_launcher is None:
        pod_launcher = KubernetesPodLauncher(
            namespace=settings.kube_namespace,
            image=settings.kube_pod_image,
            name_prefix=settings.kube_pod_prefix,
        )

    app = FastAPI(
        title=NAME,
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.settings = settings
    app.state.storage = storage
    app.state.pod_launcher = pod_launcher

    app.add_middleware(RequestLoggerMiddleware)
    register_routes(app)

    return app
