"""ProjectGate FastAPI application factory.

Entry point: uvicorn projectgate.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from projectgate.config import settings
from projectgate.database import async_engine
from projectgate.errors import ProjectGateError
from projectgate.middleware import RequestIDMiddleware, get_request_id
from projectgate.routers import health, projects, role_templates

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logging.getLogger("projectgate").setLevel(settings.LOG_LEVEL.upper())
    log.info("ProjectGate starting")

    yield

    await async_engine.dispose()


app = FastAPI(title="ProjectGate", lifespan=lifespan)

app.add_middleware(RequestIDMiddleware)


@app.exception_handler(ProjectGateError)
async def projectgate_error_handler(request: Request, exc: ProjectGateError) -> JSONResponse:
    error: dict[str, str | None] = {
        "code": exc.code,
        "message": exc.message,
        "request_id": get_request_id(),
    }
    if exc.field is not None:
        error["field"] = exc.field
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": error},
        headers={"X-Request-ID": get_request_id()},
    )


app.include_router(health.router)
app.include_router(projects.router)
app.include_router(role_templates.router)
