import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from praxis import __version__
from praxis.api.deps import get_settings, load_cached_site_config
from praxis.api.routes import public_ssr
from praxis.site.loader import load_site_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    load_cached_site_config.cache_clear()

    # Load site config on startup (fail-fast)
    try:
        config = load_site_config(settings.site_path)
    except (FileNotFoundError, ValueError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("Site config load failed: %s", e)
        sys.exit(1)

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Site config loaded from %s", settings.site_path)

    yield


app = FastAPI(
    title="Praxis",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
)

app.include_router(public_ssr.router, prefix="", tags=["SSR"])
