import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.common.exceptions import (
    KnownException,
    PageStorageException,
    RouteNotFoundException,
    TemplateRenderException,
    http_exception_handler,
    internal_error_response,
    known_exception_handler,
    page_storage_exception_handler,
    route_not_found_handler,
    template_render_exception_handler,
    unexpected_exception_handler,
)
from src.config import get_settings
from src.pages.config import WikiConfig
from src.pages.dispatcher import Dispatcher
from src.pages.store import PageStore
from src.pages.templates import TemplateRenderer
from src.pages.router import router as pages_router
from src.debug.router import router as debug_router
from src.healthcheck.router import router as health_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = WikiConfig.from_settings(settings)

    if settings.CREATE_DATA_DIR and not config.data_dir.exists():
        logger.info(f"Creating data directory {config.data_dir}")
        config.data_dir.mkdir(parents=True, exist_ok=True)

    app.state.wiki_config = config
    app.state.page_store = PageStore(config)
    app.state.template_renderer = TemplateRenderer(config)
    app.state.dispatcher = Dispatcher(config)
    logger.info(
        f"Serving pages from {config.data_dir}, front page '{config.front_page}'"
    )
    yield


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    redirect_slashes=False,
    responses={
        **internal_error_response,
    },
    version=settings.WIKI_VERSION,
)

app.exception_handler(RouteNotFoundException)(route_not_found_handler)
app.exception_handler(PageStorageException)(page_storage_exception_handler)
app.exception_handler(TemplateRenderException)(template_render_exception_handler)
app.exception_handler(KnownException)(known_exception_handler)
app.exception_handler(StarletteHTTPException)(http_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(debug_router)
app.include_router(pages_router)
