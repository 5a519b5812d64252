import re

from src.pages.config import WikiConfig
from src.pages.schemas import TITLE_PATTERN, Action, WikiRoute


class Dispatcher:
    def __init__(self, config: WikiConfig):
        self.front_page = config.front_page
        self.actions = config.actions
        alternatives = "|".join(re.escape(action.value) for action in self.actions)
        self.valid_path = re.compile(f"/({alternatives})/({TITLE_PATTERN})")

    def match(self, path: str) -> WikiRoute | None:
        m = self.valid_path.fullmatch(path)
        if m is None:
            return None
        return WikiRoute(action=Action(m.group(1)), title=m.group(2))

    def url_for(self, action: Action, title: str) -> str:
        return f"/{action.value}/{title}"

    def root_redirect(self) -> str:
        return self.url_for(Action.VIEW, self.front_page)
