import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from travel_admin.config import settings
from travel_admin.core.exceptions import (
    UnauthorizedException,
    NotFoundException,
    ValidationException,
    StoreException,
)
from travel_admin.core.logging import configure_logging
from travel_admin.routes import bank_routes, traveller_routes, user_routes

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "Banks", "description": "Bank management endpoints"},
    {"name": "Travellers", "description": "Traveller management endpoints"},
    {"name": "Users", "description": "Authenticated user endpoints"},
]

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    openapi_tags=openapi_tags,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url="/redoc" if settings.DEBUG else None,
    openapi_url="/openapi.json" if settings.DEBUG else None,
)

# CORS middleware
cors_origins = settings.cors_origins_list
if cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message, **extra},
    )


# Exception handlers
@app.exception_handler(UnauthorizedException)
async def unauthorized_exception_handler(request: Request, exc: UnauthorizedException):
    response = _error(status.HTTP_401_UNAUTHORIZED, str(exc))
    response.headers["WWW-Authenticate"] = "Bearer"
    return response


@app.exception_handler(NotFoundException)
async def not_found_exception_handler(request: Request, exc: NotFoundException):
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


@app.exception_handler(ValidationException)
async def validation_exception_handler(request: Request, exc: ValidationException):
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    # loc is ("body" | "query" | "path", field, ...)
    errors = [
        {"field": ".".join(str(part) for part in e.get("loc", ())[1:]), "message": e.get("msg")}
        for e in exc.errors()
    ]
    first = errors[0] if errors else {"field": "", "message": "Invalid request"}
    message = f"{first['field']}: {first['message']}" if first["field"] else first["message"]
    return _error(status.HTTP_400_BAD_REQUEST, message, errors=errors)


@app.exception_handler(StoreException)
async def store_exception_handler(request: Request, exc: StoreException):
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, exc.message, error=exc.operation)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error processing %s %s", request.method, request.url.path)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), error="Something went wrong")


# Health check endpoint
@app.get("/health")
async def health_check():
    return {"status": "ok", "version": settings.APP_VERSION}


# Root endpoint
@app.get("/")
async def root():
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs" if settings.DEBUG else "Documentation disabled",
    }


# Include routers
app.include_router(bank_routes.router, prefix="/bank", tags=["Banks"])
app.include_router(traveller_routes.router, prefix="/traveller", tags=["Travellers"])
app.include_router(user_routes.router, prefix="/user", tags=["Users"])
