# app/main.py
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request, APIRouter
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.db import create_tables, make_engine, make_sessionmaker
from app.routers import health, students
from app.services.student_directory import StudentDirectory
from app.shared.errors import AppError

# Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


# -------- Lifespan (startup/shutdown) --------
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: create tables and the directory that owns them
    engine = make_engine()
    await create_tables(engine)
    app.state.directory = StudentDirectory(make_sessionmaker(engine))
    logger.info("startup complete (tables ensured) on %s", engine.url.render_as_string(hide_password=True))

    try:
        yield  # ---- App runs ----
    finally:
        await engine.dispose()
        logger.info("engine disposed")


# -------- App --------
app = FastAPI(
    title="Student Directory",
    description="Create, read, update and delete student records.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS (tighten in prod)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Error handlers
@app.exception_handler(AppError)
async def app_exception_handler(_: Request, err: AppError):
    return JSONResponse(status_code=err.status_code, content={"detail": err.message, "kind": err.kind})

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    logger.error(f"Error occurred on path {request.url.path}: {str(exc)}")
    return JSONResponse(status_code=500, content={"detail": "An unexpected error occurred. Please try again later."})

# Root
@app.get("/")
def read_root():
    return {"message": "Welcome to the Student Directory"}

# API router
api_router = APIRouter(prefix="/api/v1")
api_router.include_router(students.router, tags=["Students"])
app.include_router(health.router, prefix="/system", tags=["System Health"])
app.include_router(api_router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000, reload=True)
