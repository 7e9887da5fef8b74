from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
import logging
import random
import string
import threading
from typing import Callable, Iterable

from .i18n import Localization
from .models import (
    ALL_CATEGORIES,
    AnalyticsPoint,
    Article,
    ArticleInput,
    ArticleStatus,
    Category,
    CategoryStat,
    ValidationError,
    parse_category,
    parse_status,
)
from .seed import seed_analytics, seed_articles

logger = logging.getLogger(__name__)

ID_LENGTH = 9
_ID_ALPHABET = string.digits + string.ascii_lowercase

DEFAULT_TITLE = "Untitled"
DEFAULT_AUTHOR = "Admin User"
DEFAULT_CATEGORY = Category.TECHNOLOGY


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def placeholder_image_url(seed: int) -> str:
    return f"https://picsum.photos/800/600?random={seed}"


class ArticleStore:
    """In-memory owner of the article collection and dashboard analytics.

    Every read hands out frozen ``Article`` values from a snapshot taken under
    the lock, so callers never see a live reference into the collection.
    """

    def __init__(
        self,
        localization: Localization,
        *,
        articles: Iterable[Article] | None = None,
        analytics: Iterable[AnalyticsPoint] | None = None,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._localization = localization
        self._clock = clock or _utcnow
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

        now = self._clock()
        initial = list(articles) if articles is not None else seed_articles(localization.language, now)
        ids = [a.id for a in initial]
        if len(ids) != len(set(ids)):
            raise ValidationError("Duplicate article ids in initial collection")
        self._articles: list[Article] = initial
        self._analytics: list[AnalyticsPoint] = (
            list(analytics) if analytics is not None else seed_analytics(localization, now, self._rng)
        )

    @property
    def localization(self) -> Localization:
        return self._localization

    def _snapshot(self) -> list[Article]:
        with self._lock:
            return list(self._articles)

    def _index_of(self, article_id: str) -> int | None:
        for index, article in enumerate(self._articles):
            if article.id == article_id:
                return index
        return None

    def _new_id(self) -> str:
        existing = {a.id for a in self._articles}
        while True:
            candidate = "".join(self._rng.choice(_ID_ALPHABET) for _ in range(ID_LENGTH))
            if candidate not in existing:
                return candidate

    def count(self) -> int:
        with self._lock:
            return len(self._articles)

    def query(self, search: str | None = None, category: str | None = None) -> list[Article]:
        result = self._snapshot()

        wanted = category or ""
        if wanted and wanted != ALL_CATEGORIES:
            result = [a for a in result if a.category.value == wanted]

        needle = (search or "").lower()
        if needle:
            result = [a for a in result if needle in a.title.lower() or needle in a.excerpt.lower()]

        # sorted() is stable with reverse=True, ties keep store order
        return sorted(result, key=lambda a: a.created_at, reverse=True)

    def get_by_id(self, article_id: str) -> Article | None:
        with self._lock:
            index = self._index_of(article_id)
            return self._articles[index] if index is not None else None

    def save(self, payload: ArticleInput) -> Article:
        changes = payload.provided()
        if "category" in changes:
            changes["category"] = parse_category(changes["category"])
        if "status" in changes:
            changes["status"] = parse_status(changes["status"])
        for counter in ("views", "reactions"):
            if counter in changes and int(changes[counter]) < 0:
                raise ValidationError(f"{counter} must not be negative")

        with self._lock:
            if payload.id:
                index = self._index_of(payload.id)
                if index is None:
                    logger.warning("Rejected update for unknown article id=%s", payload.id)
                    raise ValidationError("update target not found")
                updated = replace(self._articles[index], **changes)
                self._articles[index] = updated
                logger.info("Updated article id=%s fields=%s", updated.id, sorted(changes))
                return updated

            article = Article(
                id=self._new_id(),
                title=changes.get("title") or DEFAULT_TITLE,
                excerpt=changes.get("excerpt", ""),
                content=changes.get("content", ""),
                category=changes.get("category", DEFAULT_CATEGORY),
                author=changes.get("author") or DEFAULT_AUTHOR,
                image_url=changes.get("image_url") or placeholder_image_url(self._rng.randrange(100)),
                views=int(changes.get("views", 0)),
                reactions=int(changes.get("reactions", 0)),
                created_at=changes.get("created_at") or self._clock(),
                status=changes.get("status", ArticleStatus.DRAFT),
            )
            self._articles.insert(0, article)
        logger.info("Created article id=%s category=%s", article.id, article.category.value)
        return article

    def delete(self, article_id: str) -> None:
        with self._lock:
            before = len(self._articles)
            self._articles = [a for a in self._articles if a.id != article_id]
            removed = before - len(self._articles)
        if removed:
            logger.info("Deleted article id=%s", article_id)

    def get_analytics(self) -> list[AnalyticsPoint]:
        with self._lock:
            return list(self._analytics)

    def get_category_stats(self) -> list[CategoryStat]:
        counts: dict[str, int] = {}
        for article in self._snapshot():
            name = article.category.value
            counts[name] = counts.get(name, 0) + 1
        return [CategoryStat(name=name, value=value) for name, value in counts.items()]
