from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.v1.endpoints import employees
from app.api.v1.router import api_router
from app.core.config import settings
from app.services.employee_repository import employee_repository

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(application: FastAPI) -> AsyncIterator[None]:
    try:
        await employee_repository.initialize(settings)
    except Exception:
        logger.exception("Failed to initialize EmployeeRepository, continuing without DB")
    yield
    await employee_repository.close()


app = FastAPI(
    title="Employee Service API",
    description="API documentation for managing Employee data",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected invalid request %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


app.include_router(api_router)
app.include_router(employees.router, include_in_schema=False)


@app.get("/")
async def root():
    return {"message": "Employee Service API"}
