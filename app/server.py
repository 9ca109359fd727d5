from dotenv import load_dotenv

load_dotenv()
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from app.api import routes
from app.api.routes import router as api_router
from app.core.config import settings
from app.services.annotation.text_annotator import AnnotatorUnavailableError

logger = logging.getLogger(__name__)


def validate_startup_config():
    """Lädt die NLP-Pipeline beim Startup (fail-fast statt Fehler beim ersten Request)."""
    try:
        annotator = routes.essay_scorer.annotator
    except AnnotatorUnavailableError as e:
        raise ValueError(f"Startup validation failed:\n  - {e}") from e
    logger.info("Annotator ready: %s", type(annotator).__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level.upper())
    validate_startup_config()
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Essay Scoring API running"}
