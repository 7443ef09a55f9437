"""Main Textual TUI application for pages-showcase."""

from typing import Optional

from rich.markup import escape
from textual.app import App

from pages_showcase.cache import SessionCache
from pages_showcase.component import DEFAULT_CONSOLE_TEMPLATE, ReposComponent
from pages_showcase.config import ShowcaseConfig
from pages_showcase.errors import InvalidUser, NetworkError, ParseError, ShowcaseError
from pages_showcase.models import Repository
from pages_showcase.screens.home import HomeScreen
from pages_showcase.screens.loading import LoadingScreen
from pages_showcase.screens.repos import ReposScreen
from pages_showcase.source import RepositorySource
from pages_showcase.template import to_text


def describe_error(error: Exception, username: str, has_token: bool) -> str:
    """Turn a retrieval error into a message for the loading screen."""
    if isinstance(error, ParseError):
        return f"❌ GitHub sent an unexpected response for '{username}': {error}"
    if isinstance(error, InvalidUser):
        return "❌ Enter a GitHub username."
    if not isinstance(error, NetworkError):
        return f"❌ Unexpected error: {error}"
    if error.status_code is None:
        return "❌ Could not connect to GitHub. Check your internet connection."
    if error.status_code == 404:
        return f"❌ GitHub user '{username}' not found. Check the spelling and try again."
    if error.status_code == 401:
        return "❌ Authentication failed. Please check your GitHub token."
    if error.status_code == 403 and "rate limit" in error.body.lower():
        if has_token:
            return "❌ GitHub API rate limit exceeded. Wait a few minutes and retry."
        return (
            "❌ GitHub API rate limit exceeded "
            "(unauthenticated: 60 req/hour). "
            "Set GITHUB_TOKEN to get 5 000 req/hour."
        )
    return f"❌ GitHub API error ({error.status_code})."


class ConsoleReposComponent(ReposComponent):
    """ReposComponent whose field values are safe inside Rich markup."""

    def context(self, repo: Repository) -> dict:
        return {
            key: escape(to_text(value)) if isinstance(value, (str, list, dict)) else value
            for key, value in super().context(repo).items()
        }


class PagesShowcaseApp(App):
    """TUI listing a GitHub user's Pages repositories."""

    TITLE = "Pages Showcase"
    SUB_TITLE = "GitHub Pages sites, newest first"

    CSS = """
    Screen {
        background: $background;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        config: Optional[ShowcaseConfig] = None,
        template: str = DEFAULT_CONSOLE_TEMPLATE,
        username: Optional[str] = None,
        **kwargs,
    ) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.config = config or ShowcaseConfig.from_env()
        self.template = template
        self.initial_username = username
        # One cache per app run: the browsing session.
        self.cache = SessionCache()

    def on_mount(self) -> None:
        self.push_screen(HomeScreen(username=self.initial_username))
        if self.initial_username:
            self.show_repos(self.initial_username)

    def on_unmount(self) -> None:
        self.cache.clear()

    def show_repos(self, username: str, refresh: bool = False) -> None:
        """Fetch and display *username*'s repos. Called from the screens."""
        loading = LoadingScreen(username)
        self.push_screen(loading)

        async def _do_work() -> None:
            source = RepositorySource(self.config, self.cache)
            component = ConsoleReposComponent(username, self.template, source)
            try:
                items = await component.load(refresh=refresh)
                self.call_from_thread(self._show_results, username, items)
            except ShowcaseError as e:
                msg = describe_error(e, username, bool(self.config.token))
                self.call_from_thread(loading.update_status, msg, False)
                self.call_from_thread(self._show_error_back_button)
            finally:
                await source.close()

        self.run_worker(_do_work(), thread=True)

    def _show_results(self, username: str, items: list[str]) -> None:
        """Replace loading screen with results."""
        self.pop_screen()
        self.push_screen(ReposScreen(username, items))

    def _show_error_back_button(self) -> None:
        loading = self.screen
        if isinstance(loading, LoadingScreen):
            loading.set_phase("Press [b]  b  [/b] to go back and try again.")
