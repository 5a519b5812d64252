from fastapi import Depends, Request

from src.common.exceptions import RouteNotFoundException
from src.pages.dispatcher import Dispatcher
from src.pages.schemas import WikiRoute
from src.pages.service import PageService
from src.pages.store import PageStore
from src.pages.templates import TemplateRenderer


def get_page_store(request: Request) -> PageStore:
    return request.app.state.page_store


def get_template_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.template_renderer


def get_dispatcher(request: Request) -> Dispatcher:
    return request.app.state.dispatcher


def get_page_service(
    page_store: PageStore = Depends(get_page_store),
) -> PageService:
    return PageService(store=page_store)


def get_wiki_route(
    request: Request,
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> WikiRoute:
    path = request.scope["path"]
    route = dispatcher.match(path)
    if route is None:
        raise RouteNotFoundException(path)
    return route
