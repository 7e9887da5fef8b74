from __future__ import annotations

from datetime import datetime, timedelta
import random

from .i18n import Localization
from .models import AnalyticsPoint, Article, ArticleStatus, Category

ANALYTICS_WINDOW_DAYS = 7

# (id, category, views, reactions, age in days); texts differ per language
_SEED_META: tuple[tuple[str, Category, int, int, float], ...] = (
    ("1", Category.TECHNOLOGY, 12500, 850, 2),
    ("2", Category.BUSINESS, 8400, 320, 5),
    ("3", Category.SCIENCE, 15600, 1200, 1),
    ("4", Category.SPORTS, 45000, 5600, 0.5),
)

# (title, excerpt, content, author)
_SEED_TEXTS: dict[str, tuple[tuple[str, str, str, str], ...]] = {
    "en": (
        (
            "The Future of Quantum Computing",
            "How quantum superiority is reshaping the tech landscape in 2024.",
            "Quantum computing is no longer a distant dream. With recent breakthroughs...",
            "Alice Johnson",
        ),
        (
            "Global Markets Rally Amidst Tech Surge",
            "Investors are optimistic as major tech giants report record earnings.",
            "The S&P 500 hit a new high today as technology stocks led the charge...",
            "Mark Smith",
        ),
        (
            "Mars Colonization: A Pipe Dream?",
            "Scientists debate the feasibility of a human settlement on the Red Planet.",
            "While SpaceX continues its ambitious starship testing, biologists warn...",
            "Dr. Sarah Lee",
        ),
        (
            "Championship Finals: The Underdog Wins",
            "In a stunning turn of events, the local team takes the trophy home.",
            "The stadium was electric last night as the final whistle blew...",
            "Tom Brady",
        ),
    ),
    "ru": (
        (
            "Будущее квантовых вычислений",
            "Как квантовое превосходство меняет технологический ландшафт в 2024 году.",
            "Квантовые вычисления больше не являются далекой мечтой. Благодаря недавним прорывам "
            "в области сверхпроводников, мы стоим на пороге новой эры...",
            "Алиса Иванова",
        ),
        (
            "Мировые рынки растут на фоне технологического бума",
            "Инвесторы оптимистичны, поскольку крупнейшие технологические гиганты сообщают о рекордных доходах.",
            "Индекс S&P 500 достиг нового максимума сегодня, так как технологические акции возглавили рост...",
            "Марк Смирнов",
        ),
        (
            "Колонизация Марса: Несбыточная мечта?",
            "Ученые спорят о целесообразности поселения людей на Красной планете.",
            "Пока SpaceX продолжает свои амбициозные испытания звездолетов, биологи предупреждают о радиации...",
            "Др. Сара Ли",
        ),
        (
            "Финал чемпионата: Победа аутсайдера",
            "В потрясающем повороте событий местная команда забирает трофей домой.",
            "Стадион был наэлектризован прошлой ночью, когда прозвучал финальный свисток...",
            "Том Брэди",
        ),
    ),
}


def seed_articles(language: str, now: datetime) -> list[Article]:
    texts = _SEED_TEXTS.get(language, _SEED_TEXTS["en"])
    articles: list[Article] = []
    for (article_id, category, views, reactions, age_days), (title, excerpt, content, author) in zip(_SEED_META, texts):
        articles.append(
            Article(
                id=article_id,
                title=title,
                excerpt=excerpt,
                content=content,
                category=category,
                author=author,
                image_url=f"https://picsum.photos/800/600?random={article_id}",
                views=views,
                reactions=reactions,
                created_at=now - timedelta(days=age_days),
                status=ArticleStatus.PUBLISHED,
            )
        )
    return articles


def seed_analytics(localization: Localization, now: datetime, rng: random.Random | None = None) -> list[AnalyticsPoint]:
    """Trailing seven-day window ending today, oldest first."""
    rand = rng or random.Random()
    points: list[AnalyticsPoint] = []
    for offset in range(ANALYTICS_WINDOW_DAYS - 1, -1, -1):
        day = now - timedelta(days=offset)
        points.append(
            AnalyticsPoint(
                date=localization.weekday_label(day),
                views=rand.randint(1000, 5999),
                reactions=rand.randint(50, 549),
            )
        )
    return points
