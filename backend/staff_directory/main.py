from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from staff_directory.api.v1.router import api_router
from staff_directory.core.config import settings
from staff_directory.services.directory_client import directory_client
from staff_directory.services.location_service import location_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await directory_client.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize DirectoryClient, continuing without remote API")
    try:
        await location_service.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize LocationService, continuing without location")
    yield
    await directory_client.close()
    await location_service.close()


app = FastAPI(
    title="Staff Directory API",
    description="Employee table, map and add-employee form backed by the hiring API",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://localhost:3000",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Staff Directory API"}
