from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from roster.api.v1.router import api_router
from roster.core.config import settings
from roster.services.employee_api import employee_api
from roster.services.employee_list import ListViewRegistry
from roster.services.employee_store import EmployeeStore

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_api.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeApiClient, continuing without remote employees")

    store = EmployeeStore()
    application.state.employee_store = store
    application.state.list_views = ListViewRegistry(store, employee_api, max_views=settings.LIST_VIEW_MAX_OPEN)
    yield
    await application.state.list_views.close_all()
    await employee_api.close()


app = FastAPI(
    title="Employee Roster API",
    description="Employee list, creation, promotion and detail views",
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/")
async def root():
    return {"message": "Employee Roster API"}
