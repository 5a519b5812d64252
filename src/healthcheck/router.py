import os
from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.pages.dependencies import get_page_store, get_template_renderer
from src.pages.store import PageStore
from src.pages.templates import TemplateRenderer

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "data_dir": {"status": "ok", "path": "data"},
                        "templates": {"status": "ok", "loaded": ["view", "edit"]},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "data_dir": {
                            "status": "error",
                            "path": "data",
                            "message": "Data directory does not exist",
                        },
                        "templates": {"status": "ok", "loaded": ["view", "edit"]},
                    }
                }
            },
        },
    },
)
def healthcheck(
    page_store: PageStore = Depends(get_page_store),
    renderer: TemplateRenderer = Depends(get_template_renderer),
) -> JSONResponse:
    data_dir = page_store.data_dir
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "data_dir": {"status": "ok", "path": str(data_dir)},
        "templates": {"status": "ok"},
    }
    has_error = False

    # Check the page directory
    if not data_dir.is_dir():
        health_status["data_dir"].update(
            {"status": "error", "message": "Data directory does not exist"}
        )
        has_error = True
    elif not os.access(data_dir, os.W_OK):
        health_status["data_dir"].update(
            {"status": "error", "message": "Data directory is not writable"}
        )
        has_error = True

    # Check the template set
    loaded = [name.value for name in renderer.templates]
    if loaded:
        health_status["templates"]["loaded"] = loaded
    else:
        health_status["templates"].update(
            {"status": "error", "message": "No templates loaded"}
        )
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
