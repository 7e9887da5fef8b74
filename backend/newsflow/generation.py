from __future__ import annotations

import logging
from typing import Any

from openai import OpenAI

from .config import Settings
from .i18n import Localization
from .models import Category

logger = logging.getLogger(__name__)

SUMMARY_SOURCE_LIMIT = 1000

_BODY_PROMPTS = {
    "en": (
        'Write a comprehensive news article about "{title}" suitable for the "{category}" category. '
        "The tone should be professional and journalistic. "
        "Structure it with an introduction, body paragraphs, and a conclusion. "
        "Return ONLY the body content text, no markdown formatting for headers."
    ),
    "ru": (
        'Напиши подробную новостную статью на тему "{title}" для категории "{category}". '
        "Тон должен быть профессиональным и журналистским. "
        "Структурируй статью с введением, основной частью и заключением. "
        "Верни ТОЛЬКО текст основного содержания, без markdown форматирования заголовков."
    ),
}

_SUMMARY_PROMPTS = {
    "en": "Summarize the following article content into a short, catchy 2-sentence excerpt: {text}...",
    "ru": "Сделай короткое, привлекательное саммари (резюме) из 2 предложений для следующего текста: {text}...",
}


class OpenAITextGenerator:
    """Single-shot chat completion; raises on any failure."""

    def __init__(self, api_key: str | None, model: str, client: Any | None = None) -> None:
        self._api_key = (api_key or "").strip()
        self._model = model
        self._client = client

    @property
    def available(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> Any:
        if self._client is None:
            if not self.available:
                raise RuntimeError("OPENAI_API_KEY is not set")
            self._client = OpenAI(api_key=self._api_key, max_retries=0)
        return self._client

    def generate(self, prompt: str) -> str:
        response = self._get_client().chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=0.7,
        )
        choices = getattr(response, "choices", None)
        if not choices:
            raise RuntimeError(f"Invalid completion response: {response!r}")
        content = choices[0].message.content
        if not isinstance(content, str) or not content.strip():
            raise RuntimeError("Completion returned no text")
        return content


def build_text_generator(settings: Settings) -> OpenAITextGenerator:
    return OpenAITextGenerator(api_key=settings.openai_api_key, model=settings.openai_model)


class ContentGenerator:
    """Drafting help for the editor. Every path resolves to a string."""

    def __init__(self, localization: Localization, backend: Any) -> None:
        self._localization = localization
        self._backend = backend

    @property
    def available(self) -> bool:
        return bool(self._backend.available)

    def generate_article_body(self, title: str, category: Category | str) -> str:
        if not self.available:
            return self._localization.translate("apiKeyMissing")

        category_name = category.value if isinstance(category, Category) else str(category)
        template = _BODY_PROMPTS.get(self._localization.language, _BODY_PROMPTS["en"])
        prompt = template.format(title=title, category=category_name)
        try:
            return self._backend.generate(prompt)
        except Exception:
            logger.exception("Article body generation failed for title=%r", title)
            return self._localization.translate("genBodyFailed")

    def generate_summary(self, body: str) -> str:
        if not self.available:
            return ""

        template = _SUMMARY_PROMPTS.get(self._localization.language, _SUMMARY_PROMPTS["en"])
        prompt = template.format(text=(body or "")[:SUMMARY_SOURCE_LIMIT])
        try:
            return self._backend.generate(prompt)
        except Exception:
            logger.exception("Summary generation failed")
            return ""
