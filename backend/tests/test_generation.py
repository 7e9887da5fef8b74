from types import SimpleNamespace
import unittest
from unittest.mock import MagicMock, patch

from backend.newsflow.generation import ContentGenerator, OpenAITextGenerator
from backend.newsflow.i18n import Localization
from backend.newsflow.models import Category


class _FakeBackend:
    def __init__(self, *, available: bool = True, reply: str = "Generated text", error: Exception | None = None) -> None:
        self.available = available
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestContentGenerator(unittest.TestCase):
    def test_body_without_credential_returns_notice(self) -> None:
        backend = _FakeBackend(available=False)
        generator = ContentGenerator(Localization("en"), backend)

        text = generator.generate_article_body("Test", "Science")
        self.assertEqual(text, "API Key not configured. Please check environment variables.")
        self.assertEqual(backend.prompts, [])

    def test_body_without_credential_in_russian(self) -> None:
        generator = ContentGenerator(Localization("ru"), _FakeBackend(available=False))
        self.assertEqual(
            generator.generate_article_body("Тест", Category.SCIENCE),
            "API ключ не настроен. Пожалуйста, проверьте переменные окружения.",
        )

    def test_summary_without_credential_is_empty(self) -> None:
        backend = _FakeBackend(available=False)
        generator = ContentGenerator(Localization("en"), backend)
        self.assertEqual(generator.generate_summary("Some body"), "")
        self.assertEqual(backend.prompts, [])

    def test_body_returns_text_verbatim_after_one_call(self) -> None:
        backend = _FakeBackend(reply="  Intro.\n\nBody.\n\nConclusion.\n")
        generator = ContentGenerator(Localization("en"), backend)

        text = generator.generate_article_body("Fusion power", Category.SCIENCE)
        self.assertEqual(text, "  Intro.\n\nBody.\n\nConclusion.\n")
        self.assertEqual(len(backend.prompts), 1)
        self.assertIn('"Fusion power"', backend.prompts[0])
        self.assertIn('"Science"', backend.prompts[0])
        self.assertIn("introduction", backend.prompts[0])

    def test_prompt_follows_language(self) -> None:
        backend = _FakeBackend()
        ContentGenerator(Localization("ru"), backend).generate_article_body("Выборы", "Politics")
        self.assertIn("Напиши подробную новостную статью", backend.prompts[0])
        self.assertIn('"Politics"', backend.prompts[0])

    def test_body_failure_returns_failure_message(self) -> None:
        generator = ContentGenerator(Localization("en"), _FakeBackend(error=RuntimeError("boom")))
        with self.assertLogs("backend.newsflow.generation", level="ERROR"):
            text = generator.generate_article_body("Test", "Science")
        self.assertEqual(text, "Error generating content. Please try again later.")

    def test_summary_failure_returns_empty_string(self) -> None:
        generator = ContentGenerator(Localization("en"), _FakeBackend(error=ConnectionError("offline")))
        with self.assertLogs("backend.newsflow.generation", level="ERROR"):
            self.assertEqual(generator.generate_summary("Body"), "")

    def test_summary_uses_first_thousand_characters(self) -> None:
        backend = _FakeBackend(reply="Short. Catchy.")
        generator = ContentGenerator(Localization("en"), backend)

        body = "x" * 1000 + "y" * 500
        self.assertEqual(generator.generate_summary(body), "Short. Catchy.")
        prompt = backend.prompts[0]
        self.assertIn("2-sentence", prompt)
        self.assertIn("x" * 1000 + "...", prompt)
        self.assertNotIn("y", prompt.split(":", 1)[1])


class TestOpenAITextGenerator(unittest.TestCase):
    def test_availability_follows_api_key(self) -> None:
        self.assertFalse(OpenAITextGenerator(api_key=None, model="m").available)
        self.assertFalse(OpenAITextGenerator(api_key="   ", model="m").available)
        self.assertTrue(OpenAITextGenerator(api_key="sk-test", model="m").available)

    def test_generate_sends_single_prompt(self) -> None:
        client = MagicMock()
        client.chat.completions.create.return_value = _completion("Article text")
        backend = OpenAITextGenerator(api_key="sk-test", model="gpt-test", client=client)

        self.assertEqual(backend.generate("Write something"), "Article text")
        client.chat.completions.create.assert_called_once()
        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "gpt-test")
        self.assertEqual(kwargs["messages"], [{"role": "user", "content": "Write something"}])

    def test_generate_rejects_empty_or_missing_text(self) -> None:
        client = MagicMock()
        backend = OpenAITextGenerator(api_key="sk-test", model="m", client=client)

        client.chat.completions.create.return_value = _completion("   ")
        with self.assertRaises(RuntimeError):
            backend.generate("p")

        client.chat.completions.create.return_value = _completion(None)
        with self.assertRaises(RuntimeError):
            backend.generate("p")

        client.chat.completions.create.return_value = SimpleNamespace(choices=[])
        with self.assertRaises(RuntimeError):
            backend.generate("p")

    @patch("backend.newsflow.generation.OpenAI")
    def test_client_created_lazily_without_retries(self, mock_openai) -> None:
        mock_openai.return_value.chat.completions.create.return_value = _completion("ok")
        backend = OpenAITextGenerator(api_key="sk-test", model="m")
        mock_openai.assert_not_called()

        backend.generate("p")
        backend.generate("p")
        mock_openai.assert_called_once_with(api_key="sk-test", max_retries=0)

    def test_sdk_errors_resolve_to_failure_message(self) -> None:
        client = MagicMock()
        client.chat.completions.create.side_effect = TimeoutError("read timed out")
        backend = OpenAITextGenerator(api_key="sk-test", model="m", client=client)
        generator = ContentGenerator(Localization("en"), backend)

        with self.assertLogs("backend.newsflow.generation", level="ERROR"):
            body = generator.generate_article_body("Test", "Science")
        self.assertEqual(body, "Error generating content. Please try again later.")
        with self.assertLogs("backend.newsflow.generation", level="ERROR"):
            self.assertEqual(generator.generate_summary(body), "")


if __name__ == "__main__":
    unittest.main()
