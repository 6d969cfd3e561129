"""FastAPI application entry point."""

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi

from marketplace.application.exceptions import ApplicationError
from marketplace.domain.exceptions import DomainException
from marketplace.infrastructure.config.logging import configure_logging
from marketplace.infrastructure.config.settings import Settings, get_settings
from marketplace.presentation.api.v1 import businesses, users
from marketplace.presentation.error_schemas import ValidationErrorResponse
from marketplace.presentation.exception_handlers import (
    application_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

_settings = get_settings()
logger = configure_logging(_settings)

app = FastAPI(
    title=_settings.app_name,
    description="Validates and builds marketplace users and businesses",
    version=_settings.app_version,
    debug=_settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ApplicationError covers InvalidArgumentError; DomainException covers anything
# an entity raises that the service did not translate.
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(users.router, prefix="/api/v1")
app.include_router(businesses.router, prefix="/api/v1")

logger.info(f"{_settings.app_name} {_settings.app_version} ready ({_settings.environment})")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


@app.get("/config")
async def show_config(settings: Settings = Depends(get_settings)) -> dict[str, str | bool | list[str]]:
    """Show current configuration (non-sensitive data only)."""
    return {
        "environment": settings.environment,
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "debug": settings.debug,
        "cors_origins": settings.cors_origins_list,
        "log_level": settings.log_level,
    }


def custom_openapi():
    """
    Document 422 responses with ValidationErrorResponse.

    FastAPI's default HTTPValidationError schema does not match what
    validation_error_handler returns, so it is swapped out.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    schemas.update(schemas["ValidationErrorResponse"].pop("$defs", {}))

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi  # type: ignore[method-assign]
