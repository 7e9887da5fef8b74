from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .models import AnalyticsPoint, Article, CategoryStat
from .repositories import ArticleStore


@dataclass(frozen=True)
class DashboardSummary:
    total_views: int
    total_reactions: int
    article_count: int
    analytics: list[AnalyticsPoint]
    category_stats: list[CategoryStat]
    articles: list[Article]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_views": self.total_views,
            "total_reactions": self.total_reactions,
            "article_count": self.article_count,
            "analytics": [p.to_dict() for p in self.analytics],
            "category_stats": [s.to_dict() for s in self.category_stats],
            "articles": [a.to_dict() for a in self.articles],
        }


def build_dashboard_summary(store: ArticleStore) -> DashboardSummary:
    analytics = store.get_analytics()
    articles = store.query()
    return DashboardSummary(
        total_views=sum(p.views for p in analytics),
        total_reactions=sum(p.reactions for p in analytics),
        article_count=len(articles),
        analytics=analytics,
        category_stats=store.get_category_stats(),
        articles=articles,
    )
