"""Results screen: one card per rendered repository."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Static


class ReposScreen(Screen):
    """Lists a user's Pages repositories, most recently updated first."""

    CSS = """
    ReposScreen {
        layout: vertical;
    }
    #repos-header {
        height: 3;
        background: $primary;
        color: $text;
        text-align: center;
        padding: 1 2;
        text-style: bold;
    }
    .repo-card {
        border: round $primary-lighten-2;
        padding: 1 2;
        margin: 1 1 0 1;
        background: $surface;
        height: auto;
    }
    #empty-label {
        margin: 2;
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("b", "go_back", "Back"),
        ("r", "refresh", "Refresh"),
    ]

    def __init__(self, username: str, items: list[str], **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.username = username
        self.items = items

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        count = len(self.items)
        yield Static(
            f"  📄  {self.username}  ·  {count} Pages site{'s' if count != 1 else ''}  ",
            id="repos-header",
        )
        with VerticalScroll(id="repos-list"):
            if not self.items:
                yield Label(
                    f"{self.username} has no repositories publishing GitHub Pages.",
                    id="empty-label",
                )
            for item in self.items:
                yield Static(item, classes="repo-card")
        yield Footer()

    def action_go_back(self) -> None:
        self.app.pop_screen()

    def action_refresh(self) -> None:
        """Drop the cached list and fetch again."""
        self.app.pop_screen()
        self.app.show_repos(self.username, refresh=True)  # type: ignore[attr-defined]
