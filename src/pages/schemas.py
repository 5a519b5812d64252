from enum import Enum
from pydantic import BaseModel, ConfigDict

TITLE_PATTERN = r"[a-zA-Z0-9]+"


class Action(str, Enum):
    VIEW = "view"
    EDIT = "edit"
    SAVE = "save"

    @property
    def methods(self) -> frozenset[str]:
        if self is Action.SAVE:
            return frozenset({"POST"})
        return frozenset({"GET", "POST"})


class Page(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class WikiRoute(BaseModel):
    model_config = ConfigDict(frozen=True)

    action: Action
    title: str
