from dataclasses import dataclass
from pathlib import Path

from src.config import Settings
from src.pages.schemas import Action

PAGE_EXTENSION = ".txt"


@dataclass(frozen=True)
class WikiConfig:
    """Immutable wiki configuration, built once at startup.

    Passed into the page store, template renderer and dispatcher when they are
    constructed, so none of them reads settings or shared registries lazily.
    """

    data_dir: Path
    template_dir: Path
    base_template: str = "base"
    front_page: str = "FrontPage"
    file_mode: int = 0o600
    page_extension: str = PAGE_EXTENSION
    actions: tuple[Action, ...] = tuple(Action)

    @classmethod
    def from_settings(cls, settings: Settings) -> "WikiConfig":
        return cls(
            data_dir=settings.DATA_DIR,
            template_dir=settings.TEMPLATE_DIR,
            base_template=settings.BASE_TEMPLATE,
            front_page=settings.FRONT_PAGE,
            file_mode=settings.PAGE_FILE_MODE,
        )
