import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from typing import List

from backend.app.api.ai import router as ai_router
from backend.app.core.difficulty_registry import registry
from backend.app.core.logging_config import configure_logging
from backend.app.core.settings import CORS_ORIGINS
from backend.app.schemas.move_schema import DifficultyInfo

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    logger.info("Loaded difficulty profiles: %s", ", ".join(registry.list_all()))
    yield

app = FastAPI(title="Connect Four Move Engine", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(ai_router, prefix="/ai", tags=["AI"])

@app.get("/difficulties", response_model=List[DifficultyInfo])
async def get_available_difficulties():
    """Returns the configured difficulty profiles for the settings form."""
    return [
        DifficultyInfo(name=name, **profile.model_dump())
        for name, profile in registry.list_all().items()
    ]
