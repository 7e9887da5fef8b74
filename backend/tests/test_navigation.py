from datetime import datetime, timezone
import unittest

from backend.newsflow.models import Article, ArticleStatus, Category, ViewState
from backend.newsflow.navigation import NavigationController


def _article(article_id: str = "1") -> Article:
    return Article(
        id=article_id,
        title="Headline",
        excerpt="Short",
        content="Body",
        category=Category.SPORTS,
        author="Desk",
        image_url="https://example.org/a.jpg",
        views=1,
        reactions=0,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        status=ArticleStatus.PUBLISHED,
    )


class TestNavigationController(unittest.TestCase):
    def setUp(self) -> None:
        self.nav = NavigationController()

    def test_starts_on_public_home(self) -> None:
        snapshot = self.nav.snapshot()
        self.assertEqual(snapshot.view, ViewState.PUBLIC_HOME)
        self.assertIsNone(snapshot.selected_article)
        self.assertIsNone(snapshot.editing_id)
        self.assertFalse(snapshot.is_admin_view)

    def test_open_article_and_back(self) -> None:
        article = _article("42")
        self.assertTrue(self.nav.open_article(article))
        self.assertEqual(self.nav.view, ViewState.PUBLIC_ARTICLE)
        self.assertEqual(self.nav.selected_article, article)

        self.assertTrue(self.nav.back())
        self.assertEqual(self.nav.view, ViewState.PUBLIC_HOME)
        self.assertIsNone(self.nav.selected_article)

    def test_go_home_from_article(self) -> None:
        self.nav.open_article(_article())
        self.assertTrue(self.nav.go_home())
        self.assertEqual(self.nav.view, ViewState.PUBLIC_HOME)
        self.assertIsNone(self.nav.selected_article)

    def test_back_only_from_article(self) -> None:
        with self.assertLogs("backend.newsflow.navigation", level="WARNING"):
            self.assertFalse(self.nav.back())
        self.assertEqual(self.nav.view, ViewState.PUBLIC_HOME)

    def test_admin_login_opens_dashboard(self) -> None:
        self.assertTrue(self.nav.navigate(ViewState.ADMIN_DASHBOARD))
        self.assertEqual(self.nav.view, ViewState.ADMIN_DASHBOARD)
        self.assertTrue(self.nav.is_admin_view)

    def test_navigate_rejects_public_targets(self) -> None:
        self.nav.navigate(ViewState.ADMIN_SETTINGS)
        self.assertFalse(self.nav.navigate(ViewState.PUBLIC_ARTICLE))
        self.assertFalse(self.nav.navigate(ViewState.PUBLIC_HOME))
        self.assertEqual(self.nav.view, ViewState.ADMIN_SETTINGS)

    def test_new_article_enters_editor_without_id(self) -> None:
        self.nav.navigate(ViewState.ADMIN_DASHBOARD)
        self.assertTrue(self.nav.new_article())
        self.assertEqual(self.nav.view, ViewState.ADMIN_EDITOR)
        self.assertIsNone(self.nav.editing_id)

    def test_edit_then_close_clears_editing_id(self) -> None:
        self.nav.navigate(ViewState.ADMIN_DASHBOARD)
        self.assertTrue(self.nav.edit_article("7"))
        self.assertEqual(self.nav.editing_id, "7")

        self.assertTrue(self.nav.close_editor())
        self.assertEqual(self.nav.view, ViewState.ADMIN_DASHBOARD)
        self.assertIsNone(self.nav.editing_id)

    def test_new_article_after_edit_drops_previous_id(self) -> None:
        self.nav.edit_article("7")
        self.nav.new_article()
        self.assertIsNone(self.nav.editing_id)

    def test_sidebar_editor_entry(self) -> None:
        self.nav.edit_article("7")
        self.assertTrue(self.nav.navigate(ViewState.ADMIN_EDITOR))
        self.assertEqual(self.nav.editing_id, "7")

        self.nav.navigate(ViewState.ADMIN_SETTINGS)
        self.assertIsNone(self.nav.editing_id)
        self.nav.navigate(ViewState.ADMIN_EDITOR)
        self.assertEqual(self.nav.view, ViewState.ADMIN_EDITOR)
        self.assertIsNone(self.nav.editing_id)

    def test_close_editor_outside_editor_is_rejected(self) -> None:
        self.nav.navigate(ViewState.ADMIN_SETTINGS)
        with self.assertLogs("backend.newsflow.navigation", level="WARNING"):
            self.assertFalse(self.nav.close_editor())
        self.assertEqual(self.nav.view, ViewState.ADMIN_SETTINGS)

    def test_exit_to_site(self) -> None:
        with self.assertLogs("backend.newsflow.navigation", level="WARNING"):
            self.assertFalse(self.nav.exit_to_site())

        self.nav.edit_article("3")
        self.assertTrue(self.nav.exit_to_site())
        snapshot = self.nav.snapshot()
        self.assertEqual(snapshot.view, ViewState.PUBLIC_HOME)
        self.assertIsNone(snapshot.editing_id)
        self.assertFalse(snapshot.is_admin_view)

    def test_public_actions_rejected_in_admin(self) -> None:
        self.nav.navigate(ViewState.ADMIN_DASHBOARD)
        with self.assertLogs("backend.newsflow.navigation", level="WARNING"):
            self.assertFalse(self.nav.open_article(_article()))
            self.assertFalse(self.nav.go_home())
        self.assertEqual(self.nav.view, ViewState.ADMIN_DASHBOARD)
        self.assertIsNone(self.nav.selected_article)

    def test_leaving_article_for_admin_clears_selection(self) -> None:
        self.nav.open_article(_article())
        self.nav.navigate(ViewState.ADMIN_DASHBOARD)
        self.assertIsNone(self.nav.selected_article)

    def test_snapshot_is_detached(self) -> None:
        self.nav.edit_article("9")
        snapshot = self.nav.snapshot()
        self.nav.close_editor()
        self.assertEqual(snapshot.view, ViewState.ADMIN_EDITOR)
        self.assertEqual(snapshot.editing_id, "9")


if __name__ == "__main__":
    unittest.main()
