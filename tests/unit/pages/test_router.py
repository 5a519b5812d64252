import pytest
from pytest_mock import MockerFixture

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.pages.config import WikiConfig
from src.pages.dispatcher import Dispatcher
from src.pages.router import (
    ACTION_HANDLERS,
    ActionContext,
    edit_handler,
    save_handler,
    view_handler,
)
from src.pages.schemas import Action, Page
from src.pages.service import PageService
from src.pages.templates import TemplateName, TemplateRenderer


@pytest.fixture
def mock_page_service(mocker: MockerFixture) -> PageService:
    return mocker.Mock(spec=PageService)


@pytest.fixture
def mock_renderer(mocker: MockerFixture) -> TemplateRenderer:
    return mocker.Mock(spec=TemplateRenderer)


@pytest.fixture
def context(
    mock_page_service: PageService,
    mock_renderer: TemplateRenderer,
    wiki_config: WikiConfig,
) -> ActionContext:
    return ActionContext(
        page_service=mock_page_service,
        renderer=mock_renderer,
        dispatcher=Dispatcher(wiki_config),
        body="Hello [World]",
    )


def test_every_action_has_a_handler() -> None:
    assert set(ACTION_HANDLERS) == set(Action)


def test_view_handler_renders_view(
    context: ActionContext, mock_page_service: PageService, mock_renderer: TemplateRenderer
) -> None:
    page = Page(title="Home", body=b"text")
    mock_page_service.view_page.return_value = page  # type: ignore

    response = view_handler("Home", context)

    assert response is mock_renderer.render.return_value  # type: ignore
    mock_renderer.render.assert_called_once_with(TemplateName.VIEW, page)  # type: ignore


def test_view_handler_redirects_missing_page_to_edit(
    context: ActionContext, mock_page_service: PageService, mock_renderer: TemplateRenderer
) -> None:
    mock_page_service.view_page.side_effect = ResourceNotFoundException(  # type: ignore
        ResourceType.PAGE, "Home"
    )

    response = view_handler("Home", context)

    assert response.status_code == 302
    assert response.headers["location"] == "/edit/Home"
    mock_renderer.render.assert_not_called()  # type: ignore


def test_edit_handler_renders_edit(
    context: ActionContext, mock_page_service: PageService, mock_renderer: TemplateRenderer
) -> None:
    page = Page(title="Home")
    mock_page_service.edit_page.return_value = page  # type: ignore

    edit_handler("Home", context)

    mock_renderer.render.assert_called_once_with(TemplateName.EDIT, page)  # type: ignore


def test_save_handler_saves_and_redirects(
    context: ActionContext, mock_page_service: PageService
) -> None:
    response = save_handler("Home", context)

    mock_page_service.save_page.assert_called_once_with("Home", "Hello [World]")  # type: ignore
    assert response.status_code == 302
    assert response.headers["location"] == "/view/Home"
