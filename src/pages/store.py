import logging
import os
import re
from pathlib import Path

from src.common.exceptions import (
    KnownException,
    PageStorageException,
    ResourceNotFoundException,
    ResourceType,
)
from src.pages.config import WikiConfig
from src.pages.schemas import TITLE_PATTERN, Page

logger = logging.getLogger(__name__)


class PageStore:
    def __init__(self, config: WikiConfig):
        self.data_dir = config.data_dir
        self.file_mode = config.file_mode
        self.page_extension = config.page_extension

    def path_for(self, title: str) -> Path:
        # Titles are file name stems
        if not re.fullmatch(TITLE_PATTERN, title):
            raise KnownException(f"Invalid page title '{title}'")
        return self.data_dir / f"{title}{self.page_extension}"

    def exists(self, title: str) -> bool:
        return self.path_for(title).is_file()

    def load(self, title: str) -> Page:
        path = self.path_for(title)
        try:
            body = path.read_bytes()
        except OSError as e:
            logger.debug(f"Page '{title}' could not be read from {path}: {e}")
            raise ResourceNotFoundException(ResourceType.PAGE, title) from e

        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        path = self.path_for(page.title)
        try:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.file_mode)
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
        except OSError as e:
            raise PageStorageException(page.title, str(e)) from e

        logger.info(f"Saved page '{page.title}' ({len(page.body)} bytes) to {path}")
