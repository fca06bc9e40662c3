"""Application FastAPI autonome exposant le router des blocs."""
import logging

from fastapi import FastAPI

from .router import router

log = logging.getLogger(__name__)


def create_app() -> FastAPI:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s — %(message)s")
    app = FastAPI(title="Content Blocks")
    app.include_router(router)
    log.info("Router blocs monté sur %s", router.prefix)
    return app
