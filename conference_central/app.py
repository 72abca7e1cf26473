import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from conference_central import __version__
from conference_central.modules.settings import CORS_ORIGINS, setup_logging
from conference_central.modules.database import connect_to_db, disconnect_from_db, init_db
from conference_central.modules.conferences.api import profile_router, conference_router

setup_logging()
logger = logging.getLogger("conference_central.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_db()
    await init_db()
    logger.info("Conference Central started")
    yield
    # Shutdown
    await disconnect_from_db()


app = FastAPI(
    title="Conference Central",
    description="API for the Conference Central Backend application.",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(profile_router)
app.include_router(conference_router)


@app.get("/")
async def root():
    return {"status": "online", "system": "Conference Central"}
