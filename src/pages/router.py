from dataclasses import dataclass
from typing import Callable

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import RedirectResponse, Response

from src.common.exceptions import (
    ResourceNotFoundException,
    internal_error_response,
    redirect_response,
    route_not_found_response,
)
from src.pages.dependencies import (
    get_dispatcher,
    get_page_service,
    get_template_renderer,
    get_wiki_route,
)
from src.pages.dispatcher import Dispatcher
from src.pages.schemas import Action, WikiRoute
from src.pages.service import PageService
from src.pages.templates import TemplateName, TemplateRenderer


router = APIRouter(
    tags=["Pages"],
)


@dataclass(frozen=True)
class ActionContext:
    page_service: PageService
    renderer: TemplateRenderer
    dispatcher: Dispatcher
    body: str


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


def view_handler(title: str, ctx: ActionContext) -> Response:
    try:
        page = ctx.page_service.view_page(title)
    except ResourceNotFoundException:
        return redirect(ctx.dispatcher.url_for(Action.EDIT, title))
    return ctx.renderer.render(TemplateName.VIEW, page)


def edit_handler(title: str, ctx: ActionContext) -> Response:
    page = ctx.page_service.edit_page(title)
    return ctx.renderer.render(TemplateName.EDIT, page)


def save_handler(title: str, ctx: ActionContext) -> Response:
    ctx.page_service.save_page(title, ctx.body)
    return redirect(ctx.dispatcher.url_for(Action.VIEW, title))


ACTION_HANDLERS: dict[Action, Callable[[str, ActionContext], Response]] = {
    Action.VIEW: view_handler,
    Action.EDIT: edit_handler,
    Action.SAVE: save_handler,
}

_unhandled = set(Action) - ACTION_HANDLERS.keys()
if _unhandled:
    raise RuntimeError(f"No handler registered for actions: {sorted(_unhandled)}")


@router.get(
    "/",
    status_code=status.HTTP_302_FOUND,
    response_class=RedirectResponse,
    responses={**redirect_response},
)
def root(dispatcher: Dispatcher = Depends(get_dispatcher)):
    return redirect(dispatcher.root_redirect())


@router.api_route(
    "/{action}/{title}",
    methods=["GET", "POST"],
    response_class=Response,
    responses={
        **redirect_response,
        **route_not_found_response,
        **internal_error_response,
    },
)
def dispatch_action(
    request: Request,
    route: WikiRoute = Depends(get_wiki_route),
    body: str = Form(""),
    page_service: PageService = Depends(get_page_service),
    renderer: TemplateRenderer = Depends(get_template_renderer),
    dispatcher: Dispatcher = Depends(get_dispatcher),
) -> Response:
    if request.method not in route.action.methods:
        raise HTTPException(
            status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
            detail="Method Not Allowed",
            headers={"Allow": ", ".join(sorted(route.action.methods))},
        )

    handler = ACTION_HANDLERS[route.action]
    return handler(
        route.title,
        ActionContext(
            page_service=page_service,
            renderer=renderer,
            dispatcher=dispatcher,
            body=body,
        ),
    )
