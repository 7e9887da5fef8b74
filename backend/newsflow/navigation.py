from __future__ import annotations

from dataclasses import dataclass
import logging

from .models import Article, ViewState

logger = logging.getLogger(__name__)

PUBLIC_VIEWS = frozenset({ViewState.PUBLIC_HOME, ViewState.PUBLIC_ARTICLE})
ADMIN_VIEWS = frozenset({ViewState.ADMIN_DASHBOARD, ViewState.ADMIN_EDITOR, ViewState.ADMIN_SETTINGS})

# Which views each user action may start from
ALLOWED_ACTIONS: dict[str, frozenset[ViewState]] = {
    "open_article": PUBLIC_VIEWS,
    "back": frozenset({ViewState.PUBLIC_ARTICLE}),
    "go_home": PUBLIC_VIEWS,
    "navigate": PUBLIC_VIEWS | ADMIN_VIEWS,
    "new_article": PUBLIC_VIEWS | ADMIN_VIEWS,
    "edit_article": PUBLIC_VIEWS | ADMIN_VIEWS,
    "close_editor": frozenset({ViewState.ADMIN_EDITOR}),
    "exit_to_site": ADMIN_VIEWS,
}


@dataclass(frozen=True)
class ViewSnapshot:
    view: ViewState
    selected_article: Article | None = None
    editing_id: str | None = None

    @property
    def is_admin_view(self) -> bool:
        return self.view in ADMIN_VIEWS


class NavigationController:
    """Which screen is active, plus the article it shows or edits.

    Transitions return ``True`` when applied. A transition that is not allowed
    from the current view returns ``False`` and leaves the state untouched.
    """

    def __init__(self) -> None:
        self._view = ViewState.PUBLIC_HOME
        self._selected_article: Article | None = None
        self._editing_id: str | None = None

    @property
    def view(self) -> ViewState:
        return self._view

    @property
    def selected_article(self) -> Article | None:
        return self._selected_article

    @property
    def editing_id(self) -> str | None:
        return self._editing_id

    @property
    def is_admin_view(self) -> bool:
        return self._view in ADMIN_VIEWS

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(view=self._view, selected_article=self._selected_article, editing_id=self._editing_id)

    def _allowed(self, action: str) -> bool:
        if self._view in ALLOWED_ACTIONS[action]:
            return True
        logger.warning("Navigation action %s not allowed from %s", action, self._view.value)
        return False

    def _enter(self, view: ViewState, *, article: Article | None = None, editing_id: str | None = None) -> None:
        self._view = view
        self._selected_article = article if view == ViewState.PUBLIC_ARTICLE else None
        self._editing_id = editing_id if view == ViewState.ADMIN_EDITOR else None

    def open_article(self, article: Article) -> bool:
        if not self._allowed("open_article"):
            return False
        self._enter(ViewState.PUBLIC_ARTICLE, article=article)
        return True

    def back(self) -> bool:
        if not self._allowed("back"):
            return False
        self._enter(ViewState.PUBLIC_HOME)
        return True

    def go_home(self) -> bool:
        if not self._allowed("go_home"):
            return False
        self._enter(ViewState.PUBLIC_HOME)
        return True

    def navigate(self, view: ViewState) -> bool:
        if view not in ADMIN_VIEWS or not self._allowed("navigate"):
            return False
        # Sidebar entry to the editor keeps an edit in progress, otherwise starts a new article
        editing_id = self._editing_id if self._view == ViewState.ADMIN_EDITOR else None
        self._enter(view, editing_id=editing_id)
        return True

    def new_article(self) -> bool:
        if not self._allowed("new_article"):
            return False
        self._enter(ViewState.ADMIN_EDITOR)
        return True

    def edit_article(self, article_id: str) -> bool:
        if not self._allowed("edit_article"):
            return False
        self._enter(ViewState.ADMIN_EDITOR, editing_id=article_id)
        return True

    def close_editor(self) -> bool:
        if not self._allowed("close_editor"):
            return False
        self._enter(ViewState.ADMIN_DASHBOARD)
        return True

    def exit_to_site(self) -> bool:
        if not self._allowed("exit_to_site"):
            return False
        self._enter(ViewState.PUBLIC_HOME)
        return True
