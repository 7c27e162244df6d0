# api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import configure_logging, settings
from core.sa.database import get_database
from api.errors import register_exception_handlers
from api.routes import authors, books, genres

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize database on startup
    configure_logging()
    get_database().init_db()
    logger.info("Bookstore inventory API started")
    yield


app = FastAPI(
    title="Bookstore Inventory API",
    description="CRUD and search over books, authors and genres.",
    version="0.1.0",
    lifespan=lifespan,
)

if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

register_exception_handlers(app)

app.include_router(books.router, prefix=API_PREFIX)
app.include_router(authors.router, prefix=API_PREFIX)
app.include_router(genres.router, prefix=API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host="0.0.0.0", port=8000, reload=True)
