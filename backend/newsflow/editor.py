from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging

from .generation import ContentGenerator
from .i18n import Localization
from .models import Article, ArticleInput, ArticleStatus, Category, ValidationError
from .repositories import ArticleStore, placeholder_image_url

logger = logging.getLogger(__name__)


def _normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass
class EditorDraft:
    """Unsaved article being edited; only ``save`` ever writes it to the store."""

    id: str | None = None
    title: str = ""
    category: str = Category.TECHNOLOGY.value
    content: str = ""
    excerpt: str = ""
    status: str = ArticleStatus.DRAFT.value
    image_url: str = ""
    error: str = ""

    @classmethod
    def from_article(cls, article: Article) -> "EditorDraft":
        return cls(
            id=article.id,
            title=article.title,
            category=article.category.value,
            content=article.content,
            excerpt=article.excerpt,
            status=article.status.value,
            image_url=article.image_url,
        )

    @classmethod
    def load(cls, store: ArticleStore, editing_id: str | None) -> "EditorDraft":
        if editing_id:
            article = store.get_by_id(editing_id)
            if article:
                return cls.from_article(article)
            logger.warning("Editor opened for missing article id=%s, starting empty draft", editing_id)
        return cls()

    @property
    def is_new(self) -> bool:
        return not self.id

    def update(
        self,
        *,
        title: str | None = None,
        category: str | None = None,
        content: str | None = None,
        excerpt: str | None = None,
        status: str | None = None,
        image_url: str | None = None,
    ) -> None:
        if title is not None:
            self.title = title
        if category is not None:
            self.category = category
        if content is not None:
            self.content = _normalize_newlines(content)
        if excerpt is not None:
            self.excerpt = _normalize_newlines(excerpt)
        if status is not None:
            self.status = status
        if image_url is not None:
            self.image_url = image_url

    def generate(self, generator: ContentGenerator, localization: Localization) -> bool:
        if not self.title.strip():
            self.error = localization.translate("genError")
            return False
        self.error = ""
        self.content = generator.generate_article_body(self.title, self.category)
        self.excerpt = generator.generate_summary(self.content)
        return True

    def random_image(self, now: datetime | None = None) -> None:
        moment = now or datetime.now(timezone.utc)
        self.image_url = placeholder_image_url(int(moment.timestamp() * 1000))

    def to_input(self) -> ArticleInput:
        return ArticleInput(
            id=self.id or None,
            title=self.title,
            excerpt=self.excerpt,
            content=self.content,
            category=self.category,
            status=self.status,
            image_url=self.image_url.strip() or None,
        )

    def save(self, store: ArticleStore) -> Article | None:
        try:
            article = store.save(self.to_input())
        except ValidationError as exc:
            logger.warning("Editor save rejected: %s", exc)
            self.error = str(exc)
            return None
        self.error = ""
        return article

    def delete(self, store: ArticleStore) -> None:
        if self.id:
            store.delete(self.id)
