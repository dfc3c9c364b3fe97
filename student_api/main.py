from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import JSONResponse

import student_api.db.base  # noqa: F401
from student_api.api.main import api_router
from student_api.core.errors import NotFoundError, StoreError, ValidationError
from student_api.core.logging import configure_logging, get_logger
from student_api.core.settings import settings
from student_api.middlewares.telemetry import RequestContextMiddleware
from student_api.version import APP_VERSION, build_info

configure_logging(json=settings.LOG_JSON, level=settings.LOG_LEVEL)

app = FastAPI(title="Student API", version=APP_VERSION, debug=settings.DEBUG)

# --- Middlewares de contexto/log
app.add_middleware(RequestContextMiddleware)

# --- CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins or ["*"]
    if settings.DEBUG
    else settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


# --- Error mapping
@app.exception_handler(ValidationError)
async def validation_error(_: Request, exc: ValidationError):
    return JSONResponse(
        {
            "detail": "Validation failed",
            "errors": [{"field": e.field, "message": e.message} for e in exc.errors],
        },
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error(_: Request, exc: RequestValidationError):
    # malformed JSON or wrong body types are a bad request, not 422
    errors = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        errors.append({"field": ".".join(loc) or "body", "message": err.get("msg", "")})
    return JSONResponse(
        {"detail": "Validation failed", "errors": errors},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


@app.exception_handler(NotFoundError)
async def not_found_error(_: Request, exc: NotFoundError):
    return JSONResponse(
        {"detail": f"{exc.entity} not found"}, status_code=status.HTTP_404_NOT_FOUND
    )


@app.exception_handler(StoreError)
@app.exception_handler(SQLAlchemyError)
async def store_error(_: Request, exc: Exception):
    get_logger().exception("store.error", exc_info=exc)
    return JSONResponse(
        {"detail": "Internal Server Error"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# --- Endpoints
@app.get("/healthz", tags=["ops"])
def healthz():
    get_logger().info("health.check")
    return {"status": "ok", "env": settings.APP_ENV, "version": APP_VERSION}


@app.get("/version", tags=["ops"])
def version():
    return {
        **build_info(),
        "env": settings.APP_ENV,
        "debug": settings.DEBUG,
    }
