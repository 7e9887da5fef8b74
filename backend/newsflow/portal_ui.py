from __future__ import annotations

from pathlib import Path
from urllib.parse import urlencode

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from .dashboard import build_dashboard_summary
from .editor import EditorDraft
from .models import ALL_CATEGORIES, ArticleStatus, Category, ViewState
from .sessions import PortalSession

router = APIRouter(tags=["portal-ui"])
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

VIEW_TEMPLATES: dict[ViewState, str] = {
    ViewState.PUBLIC_HOME: "public_home.html",
    ViewState.PUBLIC_ARTICLE: "public_article.html",
    ViewState.ADMIN_DASHBOARD: "admin_dashboard.html",
    ViewState.ADMIN_EDITOR: "admin_editor.html",
    ViewState.ADMIN_SETTINGS: "admin_settings.html",
}
VIEW_TITLE_KEYS: dict[ViewState, str] = {
    ViewState.PUBLIC_HOME: "latestNews",
    ViewState.PUBLIC_ARTICLE: "siteName",
    ViewState.ADMIN_DASHBOARD: "dashboard",
    ViewState.ADMIN_EDITOR: "contentEditor",
    ViewState.ADMIN_SETTINGS: "settings",
}


def _session(request: Request) -> tuple[PortalSession, str]:
    settings = request.app.state.settings
    return request.app.state.sessions.resolve(request.cookies.get(settings.session_cookie_name))


def _with_cookie(request: Request, response: Response, token: str) -> Response:
    settings = request.app.state.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=False,
        samesite="lax",
    )
    return response


def _portal_redirect(request: Request, token: str, *, msg: str | None = None, msg_type: str = "success") -> Response:
    query: dict[str, str] = {}
    if msg:
        query["msg"] = msg
        query["type"] = msg_type
    suffix = f"?{urlencode(query)}" if query else ""
    return _with_cookie(request, RedirectResponse(url=f"/{suffix}", status_code=303), token)


def _apply_form(
    draft: EditorDraft,
    title: str | None,
    category: str | None,
    content: str | None,
    excerpt: str | None,
    status: str | None,
    image_url: str | None,
) -> None:
    draft.update(title=title, category=category, content=content, excerpt=excerpt, status=status, image_url=image_url)


def _editor_draft(request: Request, session: PortalSession) -> EditorDraft | None:
    if session.controller.view != ViewState.ADMIN_EDITOR:
        return None
    if session.draft is None:
        session.draft = EditorDraft.load(request.app.state.store, session.controller.editing_id)
    return session.draft


@router.get("/", response_class=HTMLResponse)
def portal_index(request: Request, search: str = "", category: str = ALL_CATEGORIES):
    session, token = _session(request)
    store = request.app.state.store
    localization = request.app.state.localization
    snapshot = session.controller.snapshot()

    if snapshot.view == ViewState.PUBLIC_ARTICLE and snapshot.selected_article is None:
        session.controller.back()
        snapshot = session.controller.snapshot()

    context: dict[str, object] = {
        "request": request,
        "t": localization.translate,
        "loc": localization,
        "view": snapshot.view.value,
        "is_admin": snapshot.is_admin_view,
        "title": localization.translate(VIEW_TITLE_KEYS[snapshot.view]),
        "categories": [c.value for c in Category],
        "statuses": [s.value for s in ArticleStatus],
        "flash_msg": request.query_params.get("msg", ""),
        "flash_type": request.query_params.get("type", "success"),
    }

    if snapshot.view == ViewState.PUBLIC_HOME:
        context.update(
            {
                "articles": store.query(search, category),
                "search": search,
                "active_category": category or ALL_CATEGORIES,
                "all_category": ALL_CATEGORIES,
            }
        )
    elif snapshot.view == ViewState.PUBLIC_ARTICLE:
        context["article"] = snapshot.selected_article
    elif snapshot.view == ViewState.ADMIN_DASHBOARD:
        context["summary"] = build_dashboard_summary(store)
    elif snapshot.view == ViewState.ADMIN_EDITOR:
        context["draft"] = _editor_draft(request, session)
    elif snapshot.view == ViewState.ADMIN_SETTINGS:
        context["generation_available"] = request.app.state.generator.available

    response = templates.TemplateResponse(request, VIEW_TEMPLATES[snapshot.view], context)
    return _with_cookie(request, response, token)


@router.post("/home")
def portal_home(request: Request):
    session, token = _session(request)
    session.controller.go_home()
    return _portal_redirect(request, token)


@router.post("/articles/{article_id}/open")
def portal_open_article(request: Request, article_id: str):
    session, token = _session(request)
    article = request.app.state.store.get_by_id(article_id)
    if not article:
        return _portal_redirect(request, token, msg=f"Article {article_id} not found", msg_type="error")
    session.controller.open_article(article)
    return _portal_redirect(request, token)


@router.post("/back")
def portal_back(request: Request):
    session, token = _session(request)
    session.controller.back()
    return _portal_redirect(request, token)


@router.post("/admin")
def portal_admin_login(request: Request):
    session, token = _session(request)
    if session.controller.navigate(ViewState.ADMIN_DASHBOARD):
        session.draft = None
    return _portal_redirect(request, token)


@router.post("/admin/navigate")
def portal_admin_navigate(request: Request, view: str = Form(...)):
    session, token = _session(request)
    try:
        target = ViewState(view)
    except ValueError:
        return _portal_redirect(request, token, msg=f"Unknown view: {view}", msg_type="error")

    was_editing = session.controller.view == ViewState.ADMIN_EDITOR
    if not session.controller.navigate(target):
        return _portal_redirect(request, token, msg=f"Cannot open {view} from here", msg_type="error")
    if not (was_editing and target == ViewState.ADMIN_EDITOR):
        session.draft = None
    return _portal_redirect(request, token)


@router.post("/admin/exit")
def portal_admin_exit(request: Request):
    session, token = _session(request)
    if session.controller.exit_to_site():
        session.draft = None
    return _portal_redirect(request, token)


@router.post("/admin/articles/new")
def portal_new_article(request: Request):
    session, token = _session(request)
    if session.controller.new_article():
        session.draft = EditorDraft()
    return _portal_redirect(request, token)


@router.post("/admin/articles/{article_id}/edit")
def portal_edit_article(request: Request, article_id: str):
    session, token = _session(request)
    article = request.app.state.store.get_by_id(article_id)
    if not article:
        return _portal_redirect(request, token, msg=f"Article {article_id} not found", msg_type="error")
    if session.controller.edit_article(article_id):
        session.draft = EditorDraft.from_article(article)
    return _portal_redirect(request, token)


@router.post("/admin/editor/update")
def portal_editor_update(
    request: Request,
    title: str | None = Form(None),
    category: str | None = Form(None),
    content: str | None = Form(None),
    excerpt: str | None = Form(None),
    status: str | None = Form(None),
    image_url: str | None = Form(None),
):
    session, token = _session(request)
    draft = _editor_draft(request, session)
    if draft is not None:
        _apply_form(draft, title, category, content, excerpt, status, image_url)
    return _portal_redirect(request, token)


@router.post("/admin/editor/generate")
def portal_editor_generate(
    request: Request,
    title: str | None = Form(None),
    category: str | None = Form(None),
    content: str | None = Form(None),
    excerpt: str | None = Form(None),
    status: str | None = Form(None),
    image_url: str | None = Form(None),
):
    session, token = _session(request)
    draft = _editor_draft(request, session)
    if draft is None:
        return _portal_redirect(request, token)
    _apply_form(draft, title, category, content, excerpt, status, image_url)
    draft.generate(request.app.state.generator, request.app.state.localization)
    return _portal_redirect(request, token)


@router.post("/admin/editor/random-image")
def portal_editor_random_image(
    request: Request,
    title: str | None = Form(None),
    category: str | None = Form(None),
    content: str | None = Form(None),
    excerpt: str | None = Form(None),
    status: str | None = Form(None),
    image_url: str | None = Form(None),
):
    session, token = _session(request)
    draft = _editor_draft(request, session)
    if draft is not None:
        _apply_form(draft, title, category, content, excerpt, status, image_url)
        draft.random_image()
    return _portal_redirect(request, token)


@router.post("/admin/editor/save")
def portal_editor_save(
    request: Request,
    title: str | None = Form(None),
    category: str | None = Form(None),
    content: str | None = Form(None),
    excerpt: str | None = Form(None),
    status: str | None = Form(None),
    image_url: str | None = Form(None),
):
    session, token = _session(request)
    draft = _editor_draft(request, session)
    if draft is None:
        return _portal_redirect(request, token)
    _apply_form(draft, title, category, content, excerpt, status, image_url)
    article = draft.save(request.app.state.store)
    if article is None:
        return _portal_redirect(request, token, msg=draft.error, msg_type="error")
    session.controller.close_editor()
    session.draft = None
    return _portal_redirect(request, token, msg=f"Saved: {article.title}")


@router.post("/admin/editor/cancel")
def portal_editor_cancel(request: Request):
    session, token = _session(request)
    if session.controller.close_editor():
        session.draft = None
    return _portal_redirect(request, token)


@router.post("/admin/editor/delete")
def portal_editor_delete(request: Request):
    session, token = _session(request)
    draft = _editor_draft(request, session)
    if draft is None:
        return _portal_redirect(request, token)
    draft.delete(request.app.state.store)
    session.controller.close_editor()
    session.draft = None
    return _portal_redirect(request, token)
