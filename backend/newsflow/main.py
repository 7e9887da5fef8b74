from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from pydantic import BaseModel, Field

from .config import Settings, configure_logging, get_settings
from .dashboard import build_dashboard_summary
from .generation import ContentGenerator, build_text_generator
from .i18n import Localization, build_localization
from .models import ArticleInput, ArticleStatus, Category, ValidationError
from .portal_ui import router as portal_router
from .repositories import ArticleStore
from .sessions import SessionRegistry

logger = logging.getLogger(__name__)

api_router = APIRouter(tags=["api"])


class ArticleSaveRequest(BaseModel):
    id: str | None = None
    title: str | None = Field(default=None, max_length=500)
    excerpt: str | None = None
    content: str | None = None
    category: Category | None = None
    author: str | None = Field(default=None, max_length=200)
    image_url: str | None = Field(default=None, max_length=2000)
    views: int | None = Field(default=None, ge=0)
    reactions: int | None = Field(default=None, ge=0)
    status: ArticleStatus | None = None


class ArticleBodyRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    category: Category


class SummaryRequest(BaseModel):
    content: str


def _store(request: Request) -> ArticleStore:
    return request.app.state.store


def _generator(request: Request) -> ContentGenerator:
    return request.app.state.generator


@api_router.get("/health")
def health(request: Request) -> dict:
    settings: Settings = request.app.state.settings
    localization: Localization = request.app.state.localization
    return {
        "status": "ok",
        "service": settings.app_name,
        "language": localization.language,
        "articles": _store(request).count(),
        "generation_available": _generator(request).available,
    }


@api_router.get("/api/articles")
def list_articles(request: Request, search: str | None = None, category: str | None = None) -> dict:
    items = [a.to_dict() for a in _store(request).query(search, category)]
    return {"ok": True, "items": items, "count": len(items)}


@api_router.get("/api/articles/{article_id}")
def get_article(request: Request, article_id: str) -> dict:
    article = _store(request).get_by_id(article_id)
    if not article:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article not found")
    return {"ok": True, "item": article.to_dict()}


@api_router.post("/api/articles")
def save_article(request: Request, payload: ArticleSaveRequest) -> dict:
    try:
        article = _store(request).save(ArticleInput(**payload.model_dump()))
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"ok": True, "item": article.to_dict()}


@api_router.delete("/api/articles/{article_id}")
def delete_article(request: Request, article_id: str) -> dict:
    _store(request).delete(article_id)
    return {"ok": True}


@api_router.get("/api/analytics")
def analytics(request: Request) -> dict:
    return {"ok": True, "items": [p.to_dict() for p in _store(request).get_analytics()]}


@api_router.get("/api/category-stats")
def category_stats(request: Request) -> dict:
    return {"ok": True, "items": [s.to_dict() for s in _store(request).get_category_stats()]}


@api_router.get("/api/dashboard")
def dashboard(request: Request) -> dict:
    return {"ok": True, **build_dashboard_summary(_store(request)).to_dict()}


@api_router.post("/api/generate/article-body")
def generate_article_body(request: Request, payload: ArticleBodyRequest) -> dict:
    return {"ok": True, "text": _generator(request).generate_article_body(payload.title, payload.category)}


@api_router.post("/api/generate/summary")
def generate_summary(request: Request, payload: SummaryRequest) -> dict:
    return {"ok": True, "text": _generator(request).generate_summary(payload.content)}


@api_router.get("/api/i18n")
def i18n_strings(request: Request) -> dict:
    localization: Localization = request.app.state.localization
    return {"ok": True, "language": localization.language, "strings": localization.strings}


def create_app(
    settings: Settings | None = None,
    *,
    store: ArticleStore | None = None,
    generator: ContentGenerator | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    if store is None:
        localization = build_localization(settings)
        store = ArticleStore(localization)
    else:
        localization = store.localization
    if generator is None:
        generator = ContentGenerator(localization, build_text_generator(settings))

    app = FastAPI(title=settings.app_name)
    app.state.settings = settings
    app.state.localization = localization
    app.state.store = store
    app.state.generator = generator
    app.state.sessions = SessionRegistry(settings.app_secret_key, settings.session_max_age_seconds)
    app.include_router(api_router)
    app.include_router(portal_router)

    logger.info(
        "%s started: language=%s articles=%d generation=%s",
        settings.app_name,
        localization.language,
        store.count(),
        "on" if generator.available else "off",
    )
    return app


app = create_app()
