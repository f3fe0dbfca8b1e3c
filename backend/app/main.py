import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.logging import setup_logging
from app.modules.admin.router import router as admin_router

setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    logger.info("Admin contract API ready; webhook endpoints under %s", settings.app_base_url)
    yield


app = FastAPI(title="StoreBot Admin API", lifespan=lifespan)

app.include_router(admin_router)
