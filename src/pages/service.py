import logging

from src.common.exceptions import ResourceNotFoundException
from src.pages.links import render_links
from src.pages.schemas import Page
from src.pages.store import PageStore

logger = logging.getLogger(__name__)


class PageService:
    def __init__(self, store: PageStore):
        self.store = store

    def view_page(self, title: str) -> Page:
        page = self.store.load(title)
        return page.model_copy(update={"body": render_links(page.body)})

    def edit_page(self, title: str) -> Page:
        try:
            return self.store.load(title)
        except ResourceNotFoundException:
            logger.debug(f"Page '{title}' does not exist yet, editing an empty page")
            return Page(title=title)

    def save_page(self, title: str, body: str) -> Page:
        page = Page(title=title, body=body.encode("utf-8"))
        self.store.save(page)
        return page
