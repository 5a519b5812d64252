import sys
from typing import Any
from fastapi import APIRouter, Depends

from src.common.counters import Counters, get_counters

router = APIRouter(
    prefix="/debug",
    tags=["Debug"],
)


@router.get(
    "/vars",
    responses={
        200: {
            "description": "Published process variables",
            "content": {
                "application/json": {
                    "example": {
                        "cmdline": ["fastapi", "run", "src/main.py"],
                        "counters": {},
                    }
                }
            },
        }
    },
)
def debug_vars(counters: Counters = Depends(get_counters)) -> dict[str, Any]:
    return {
        "cmdline": sys.argv,
        "counters": counters.snapshot(),
    }
