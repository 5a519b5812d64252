from enum import Enum
import logging

from fastapi.responses import HTMLResponse
from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    Template,
    TemplateError,
    select_autoescape,
)

from src.common.exceptions import TemplateRenderException
from src.pages.config import WikiConfig
from src.pages.schemas import Page

logger = logging.getLogger(__name__)


class TemplateName(str, Enum):
    VIEW = "view"
    EDIT = "edit"


class TemplateRenderer:
    """Renders pages into the fixed set of action templates.

    Every template in ``TemplateName`` is loaded when the renderer is built and
    each one extends the shared base template, so a missing or malformed file
    fails startup instead of the first request.
    """

    def __init__(self, config: WikiConfig):
        self.base_template = f"{config.base_template}.html"
        self.environment = Environment(
            loader=FileSystemLoader(str(config.template_dir)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )
        self.templates: dict[TemplateName, Template] = {
            name: self.environment.get_template(f"{name.value}.html")
            for name in TemplateName
        }
        # The base template is only reached through inheritance, load it eagerly too
        self.environment.get_template(self.base_template)
        logger.debug(
            f"Loaded templates {[name.value for name in self.templates]} "
            f"from {config.template_dir}"
        )

    def render(self, name: TemplateName, page: Page) -> HTMLResponse:
        template = self.templates.get(name)
        if template is None:
            raise TemplateRenderException(str(name), f"Unknown template '{name}'")

        try:
            content = template.render(page=page, base_template=self.base_template)
        except TemplateError as e:
            raise TemplateRenderException(name.value, str(e)) from e

        return HTMLResponse(content)
