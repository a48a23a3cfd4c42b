import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from jobsearch import __version__
from jobsearch.config import settings
from jobsearch.database import init_db
from jobsearch.logging_config import configure_logging
from jobsearch.routers import contacts, home, job_openings

logger = logging.getLogger("jobsearch")


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.log_level)
    init_db()
    logger.info("Database ready at %s", settings.db_path)
    yield


app = FastAPI(
    title="Job Search",
    description="Personal job search tracker for contacts, activities and job openings",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(home.router, prefix=settings.api_prefix)
app.include_router(contacts.router, prefix=settings.api_prefix)
app.include_router(job_openings.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}
