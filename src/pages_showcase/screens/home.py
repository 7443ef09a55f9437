"""Home screen: username input."""

from typing import Optional

from textual import on
from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Input, Label, Static


class HomeScreen(Screen):
    """Initial screen to collect a GitHub username."""

    CSS = """
    HomeScreen {
        align: center middle;
    }
    #home-container {
        width: 64;
        height: auto;
        padding: 1 4;
        border: round $primary;
        background: $surface;
    }
    #subtitle {
        text-align: center;
        color: $text-muted;
        margin-bottom: 2;
    }
    .field-label {
        margin-top: 1;
        color: $text;
    }
    #show-btn {
        margin-top: 2;
        width: 100%;
    }
    #error-label {
        color: $error;
        text-align: center;
        margin-top: 1;
    }
    """

    def __init__(self, username: Optional[str] = None, **kwargs) -> None:  # type: ignore[no-untyped-def]
        super().__init__(**kwargs)
        self.initial_username = username or ""

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Center():
            with Vertical(id="home-container"):
                yield Static("GitHub Pages sites, newest first", id="subtitle")
                yield Label("GitHub username:", classes="field-label")
                yield Input(
                    value=self.initial_username,
                    placeholder="e.g. octocat",
                    id="username-input",
                )
                yield Button("▶  Show Pages", id="show-btn", variant="primary")
                yield Label("", id="error-label")
        yield Footer()

    def on_mount(self) -> None:
        self.query_one("#username-input", Input).focus()

    @on(Button.Pressed, "#show-btn")
    def show_repos(self) -> None:
        username = self.query_one("#username-input", Input).value.strip()
        error_label = self.query_one("#error-label", Label)
        if not username or "/" in username or " " in username:
            error_label.update("⚠  Enter a GitHub username (e.g. octocat)")
            return
        error_label.update("")
        self.app.show_repos(username)  # type: ignore[attr-defined]

    @on(Input.Submitted, "#username-input")
    def submit_on_enter(self) -> None:
        self.show_repos()
