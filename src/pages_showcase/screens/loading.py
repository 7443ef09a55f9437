"""Loading screen: shown while repositories are fetched."""

from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, LoadingIndicator, Static


class LoadingScreen(Screen):
    """Displayed while a user's repositories are retrieved."""

    BINDINGS = [
        ("b", "go_back", "Back"),
    ]

    CSS = """
    LoadingScreen {
        align: center middle;
    }
    #loading-container {
        width: 64;
        height: auto;
        padding: 2 4;
        border: round $primary;
        background: $surface;
    }
    #loading-title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }
    #status-label {
        text-align: center;
        margin-bottom: 1;
    }
    #phase-label {
        text-align: center;
        color: $text-muted;
    }
    """

    def __init__(self, username: str, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.username = username

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="loading-container"):
                yield Static(f"🔍  Fetching {self.username} …", id="loading-title")
                yield LoadingIndicator(id="spinner")
                yield Label("Checking session cache …", id="status-label")
                yield Label("", id="phase-label")
        yield Footer()

    def update_status(self, message: str, busy: bool = True) -> None:
        """Update the status message; ``busy=False`` hides the spinner."""
        try:
            self.query_one("#status-label", Label).update(message)
            self.query_one("#spinner", LoadingIndicator).display = busy
        except NoMatches:
            pass

    def set_phase(self, phase: str) -> None:
        try:
            self.query_one("#phase-label", Label).update(phase)
        except NoMatches:
            pass

    def action_go_back(self) -> None:
        """Return to the home screen."""
        self.app.pop_screen()
