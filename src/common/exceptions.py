from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    PAGE = "Page"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(
        self, resource_type: ResourceType, identifier: str, message: str | None = None
    ):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(message or f"{self.resource_type} '{identifier}' not found")


class RouteNotFoundException(Exception):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"No wiki route matches '{path}'")


class PageStorageException(Exception):
    def __init__(self, title: str, message: str):
        self.title = title
        super().__init__(message)


class TemplateRenderException(Exception):
    def __init__(self, template_name: str, message: str):
        self.template_name = template_name
        super().__init__(message)


class KnownException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


# Exception handlers
def route_not_found_handler(request: Request, exc: RouteNotFoundException):
    logger.error(exc)
    return PlainTextResponse(
        "404 page not found",
        status_code=status.HTTP_404_NOT_FOUND,
    )


def page_storage_exception_handler(request: Request, exc: PageStorageException):
    logger.error(f"Failed to save page '{exc.title}': {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def template_render_exception_handler(
    request: Request, exc: TemplateRenderException
):
    logger.error(f"Failed to render template '{exc.template_name}': {exc}")
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def known_exception_handler(request: Request, exc: KnownException):
    logger.error(exc)
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.error(f"{request.method} {request.url.path}: {exc.detail}")
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=exc.headers,
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def plain_text_response(status_code: int, description: str, example: str):
    return {
        status_code: {
            "description": description,
            "content": {"text/plain": {"example": example}},
        }
    }


route_not_found_response: ResponseDict = plain_text_response(
    404, "No wiki route matches the path", "404 page not found"
)

redirect_response: ResponseDict = {
    302: {
        "description": "Redirect to another wiki page",
        "headers": {"Location": {"schema": {"type": "string"}}},
    }
}

internal_error_response: ResponseDict = plain_text_response(
    500, "Internal server error", "An unexpected error occurred"
)
