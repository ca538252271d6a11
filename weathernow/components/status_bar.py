"""Status bar component showing activity, footer text and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


class StatusBar(Horizontal):
    """Bottom status bar with time, current activity and footer text."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-activity {
        width: auto;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-footer {
        width: auto;
        padding-right: 2;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-activity")
        yield Static("", id="status-spacer")
        yield Static("", id="status-footer")
        yield Static(
            "[dim]F1[/dim] Search  [dim]F2[/dim] Favorites  [dim]Ctrl+Q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self._update_time()
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        """Update the current time display."""
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

    def set_footer(self, text: str) -> None:
        self.query_one("#status-footer", Static).update(f"[dim]{text}[/dim]")

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Searching...')."""
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")
