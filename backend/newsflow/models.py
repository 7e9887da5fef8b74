from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from typing import Any

ALL_CATEGORIES = "All"


class ValidationError(ValueError):
    pass


class Category(str, Enum):
    TECHNOLOGY = "Technology"
    BUSINESS = "Business"
    POLITICS = "Politics"
    SPORTS = "Sports"
    LIFESTYLE = "Lifestyle"
    SCIENCE = "Science"


class ArticleStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class ViewState(str, Enum):
    PUBLIC_HOME = "PUBLIC_HOME"
    PUBLIC_ARTICLE = "PUBLIC_ARTICLE"
    ADMIN_DASHBOARD = "ADMIN_DASHBOARD"
    ADMIN_EDITOR = "ADMIN_EDITOR"
    ADMIN_SETTINGS = "ADMIN_SETTINGS"


def parse_category(value: Category | str) -> Category:
    if isinstance(value, Category):
        return value
    try:
        return Category(str(value).strip())
    except ValueError:
        raise ValidationError(f"Unknown category: {value!r}") from None


def parse_status(value: ArticleStatus | str) -> ArticleStatus:
    if isinstance(value, ArticleStatus):
        return value
    try:
        return ArticleStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown status: {value!r}") from None


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    excerpt: str
    content: str
    category: Category
    author: str
    image_url: str
    views: int
    reactions: int
    created_at: datetime
    status: ArticleStatus

    def paragraphs(self) -> list[str]:
        """Maximal non-empty runs of ``content`` between newline characters."""
        return [line.rstrip("\r") for line in self.content.split("\n") if line.strip()]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "excerpt": self.excerpt,
            "content": self.content,
            "category": self.category.value,
            "author": self.author,
            "image_url": self.image_url,
            "views": self.views,
            "reactions": self.reactions,
            "created_at": self.created_at.isoformat(),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class ArticleInput:
    """Partial article for ``ArticleStore.save``; ``None`` means "not provided"."""

    id: str | None = None
    title: str | None = None
    excerpt: str | None = None
    content: str | None = None
    category: Category | str | None = None
    author: str | None = None
    image_url: str | None = None
    views: int | None = None
    reactions: int | None = None
    created_at: datetime | None = None
    status: ArticleStatus | str | None = None

    def provided(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.name != "id" and getattr(self, f.name) is not None}


@dataclass(frozen=True)
class AnalyticsPoint:
    date: str
    views: int
    reactions: int

    def to_dict(self) -> dict[str, Any]:
        return {"date": self.date, "views": self.views, "reactions": self.reactions}


@dataclass(frozen=True)
class CategoryStat:
    name: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "value": self.value}
