"""UI strings and locale-aware formatting.

The language is resolved once at startup and carried around in an explicit
``Localization`` object; nothing in the portal reads it from global state.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
import os
from typing import Mapping

from .config import Settings

SUPPORTED_LANGUAGES = ("en", "ru")
DEFAULT_LANGUAGE = "en"

TRANSLATIONS: dict[str, dict[str, str]] = {
    "en": {
        # General
        "siteName": "NewsFlow",
        "adminBadge": "Admin",
        "exitToSite": "Exit to Site",
        "latestNews": "Latest News",
        "newsSubtitle": "Insights into technology, business, and beyond.",
        "searchPlaceholder": "Search articles...",
        "all": "All",
        "readArticle": "Read Article",
        "backToNews": "Back to News",
        "views": "views",
        "share": "Share",
        "endOfArticle": "End of article",
        "footerRights": "NewsFlow Platform. All rights reserved.",
        "adminLogin": "Admin Login",
        "latest": "Latest",
        "trending": "Trending",
        "about": "About",
        "noArticles": "No articles found matching your criteria.",
        # Admin sidebar
        "dashboard": "Dashboard",
        "contentEditor": "Content Editor",
        "settings": "Settings",
        # Admin dashboard
        "totalViews": "Total Views",
        "totalReactions": "Total Reactions",
        "articlesPublished": "Articles Published",
        "trafficOverview": "Traffic Overview",
        "articlesByCategory": "Articles by Category",
        "recentArticles": "Recent Articles",
        "newArticle": "New Article",
        "tableTitle": "Title",
        "tableCategory": "Category",
        "tableViews": "Views",
        "tableDate": "Date",
        "tableActions": "Actions",
        "edit": "Edit",
        # Content editor
        "editArticle": "Edit Article",
        "createArticle": "Create New Article",
        "titleLabel": "Title",
        "titlePlaceholder": "Enter article title",
        "categoryLabel": "Category",
        "imageLabel": "Image URL",
        "random": "Random",
        "contentLabel": "Content",
        "contentPlaceholder": "Write your article content here...",
        "autoWrite": "Auto-Write with AI",
        "excerptLabel": "Excerpt (Summary)",
        "excerptPlaceholder": "Short summary for the card preview...",
        "statusLabel": "Status",
        "delete": "Delete",
        "cancel": "Cancel",
        "saveArticle": "Save Article",
        "deleteConfirm": "Are you sure you want to delete this draft?",
        "genError": "Please enter a title first to generate content.",
        "genFail": "Failed to generate content. Check API Key configuration.",
        "apiKeyMissing": "API Key not configured. Please check environment variables.",
        "genBodyFailed": "Error generating content. Please try again later.",
        "settingsHint": "Platform configuration would go here (Theme, User Roles, API Keys).",
        "generationAvailable": "Text generation",
        "enabled": "enabled",
        "disabled": "disabled",
        "language": "Language",
        # Status
        "draft": "Draft",
        "published": "Published",
        # Categories
        "Technology": "Technology",
        "Business": "Business",
        "Politics": "Politics",
        "Sports": "Sports",
        "Lifestyle": "Lifestyle",
        "Science": "Science",
    },
    "ru": {
        # General
        "siteName": "NewsFlow",
        "adminBadge": "Админ",
        "exitToSite": "На сайт",
        "latestNews": "Последние новости",
        "newsSubtitle": "Инсайты о технологиях, бизнесе и не только.",
        "searchPlaceholder": "Поиск статей...",
        "all": "Все",
        "readArticle": "Читать",
        "backToNews": "Назад к новостям",
        "views": "просмотров",
        "share": "Поделиться",
        "endOfArticle": "Конец статьи",
        "footerRights": "Платформа NewsFlow. Все права защищены.",
        "adminLogin": "Вход для админа",
        "latest": "Последнее",
        "trending": "Популярное",
        "about": "О нас",
        "noArticles": "Статей по вашему запросу не найдено.",
        # Admin sidebar
        "dashboard": "Дашборд",
        "contentEditor": "Редактор",
        "settings": "Настройки",
        # Admin dashboard
        "totalViews": "Всего просмотров",
        "totalReactions": "Всего реакций",
        "articlesPublished": "Опубликовано статей",
        "trafficOverview": "Обзор трафика",
        "articlesByCategory": "Статьи по категориям",
        "recentArticles": "Недавние статьи",
        "newArticle": "Новая статья",
        "tableTitle": "Заголовок",
        "tableCategory": "Категория",
        "tableViews": "Просмотры",
        "tableDate": "Дата",
        "tableActions": "Действия",
        "edit": "Ред.",
        # Content editor
        "editArticle": "Редактировать статью",
        "createArticle": "Создать новую статью",
        "titleLabel": "Заголовок",
        "titlePlaceholder": "Введите заголовок статьи",
        "categoryLabel": "Категория",
        "imageLabel": "URL изображения",
        "random": "Случайно",
        "contentLabel": "Содержание",
        "contentPlaceholder": "Напишите содержание статьи здесь...",
        "autoWrite": "Авто-написание (ИИ)",
        "excerptLabel": "Отрывок (Саммари)",
        "excerptPlaceholder": "Краткое содержание для превью...",
        "statusLabel": "Статус",
        "delete": "Удалить",
        "cancel": "Отмена",
        "saveArticle": "Сохранить",
        "deleteConfirm": "Вы уверены, что хотите удалить этот черновик?",
        "genError": "Пожалуйста, сначала введите заголовок для генерации.",
        "genFail": "Не удалось сгенерировать. Проверьте настройки API Key.",
        "apiKeyMissing": "API ключ не настроен. Пожалуйста, проверьте переменные окружения.",
        "genBodyFailed": "Ошибка при генерации текста. Пожалуйста, попробуйте позже.",
        "settingsHint": "Здесь будут настройки платформы (тема, роли пользователей, API ключи).",
        "generationAvailable": "Генерация текста",
        "enabled": "включена",
        "disabled": "выключена",
        "language": "Язык",
        # Status
        "draft": "Черновик",
        "published": "Опубликовано",
        # Categories
        "Technology": "Технологии",
        "Business": "Бизнес",
        "Politics": "Политика",
        "Sports": "Спорт",
        "Lifestyle": "Лайфстайл",
        "Science": "Наука",
    },
}

_MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
# Genitive case, as used in "5 марта 2026 г."
_MONTHS_RU = (
    "января", "февраля", "марта", "апреля", "мая", "июня",
    "июля", "августа", "сентября", "октября", "ноября", "декабря",
)
_WEEKDAYS_EN = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_WEEKDAYS_RU = ("пн", "вт", "ср", "чт", "пт", "сб", "вс")


def normalize_language(value: str | None) -> str:
    raw = (value or "").strip().lower()
    return "ru" if raw.startswith("ru") else DEFAULT_LANGUAGE


def resolve_language(settings: Settings, environ: Mapping[str, str] | None = None) -> str:
    if settings.app_language:
        return normalize_language(settings.app_language)
    env = os.environ if environ is None else environ
    for key in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = (env.get(key) or "").strip()
        if value:
            return normalize_language(value)
    return DEFAULT_LANGUAGE


@dataclass(frozen=True)
class Localization:
    language: str

    @property
    def strings(self) -> dict[str, str]:
        return dict(TRANSLATIONS[self.language])

    def translate(self, key: str) -> str:
        # Unknown keys come back unchanged so dynamic labels still render
        return TRANSLATIONS[self.language].get(key) or key

    def format_date(self, value: datetime | date) -> str:
        if self.language == "ru":
            return f"{value.day} {_MONTHS_RU[value.month - 1]} {value.year} г."
        return f"{_MONTHS_EN[value.month - 1]} {value.day}, {value.year}"

    def format_short_date(self, value: datetime | date) -> str:
        if self.language == "ru":
            return f"{value.day:02d}.{value.month:02d}.{value.year}"
        return f"{value.month}/{value.day}/{value.year}"

    def weekday_label(self, value: datetime | date) -> str:
        names = _WEEKDAYS_RU if self.language == "ru" else _WEEKDAYS_EN
        return names[value.weekday()]

    def format_number(self, value: int) -> str:
        grouped = f"{value:,}"
        if self.language == "ru":
            return grouped.replace(",", " ")
        return grouped


def build_localization(settings: Settings, environ: Mapping[str, str] | None = None) -> Localization:
    return Localization(language=resolve_language(settings, environ))
