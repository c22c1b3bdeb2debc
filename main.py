import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config.security import SecurityConfig
from app.database import engine
from app.routers import admin, auth, tasks
from app.utils.errors import register_exception_handlers

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Task Analytics API...")
    yield
    # Release pooled connections
    engine.dispose()
    logger.info("Task Analytics API stopped")


app = FastAPI(title="Task Analytics API", lifespan=lifespan)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=SecurityConfig.CORS['allow_origins'],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Route registration
app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
app.include_router(admin.router, prefix="/admin", tags=["Admin"])
app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])


# Root route
@app.get("/")
def read_root():
    return {"message": "Task Analytics API"}


@app.get("/health")
def health():
    return {"status": "ok"}
