# =============================================================================
# Classify Screen
# =============================================================================
# The main (and only) full-screen view: type a message, press Enter, and
# see its spam score and verdict.
#
# Reference data is loaded in a background thread when the screen mounts,
# since building the corpora from a few thousand messages takes a moment.
# Scoring also runs in a thread so a large corpus never blocks the UI.
#
# Entering "0" exits, the same as pressing Ctrl+Q.
# =============================================================================

import logging

from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import Screen
from textual.widgets import Footer, Header, Input, Static

from spamscore.config import Config
from spamscore.core import Classification, SpamScoreError
from spamscore.spam.filter import SpamFilter
from spamscore.ui.widgets.result_log import ResultLog

logger = logging.getLogger(__name__)

# Typing this on its own quits the app
EXIT_COMMAND = "0"

INSTRUCTIONS = """\
[bold]NLP Spam Classifier[/]
- Enter a message to classify it as spam or human.
- Type 0 and press Enter (or press Ctrl+Q) to exit.
- The higher the score, the more similar the text is to spam.
- Score ranges from negative infinity to infinity.
- [dim]Stopwords from: https://gist.github.com/sebleier/554280[/]
- [dim]Spam/Ham dataset from: https://www.kaggle.com/datasets/uciml/sms-spam-collection-dataset[/]\
"""


def describe_filter(spam_filter: SpamFilter) -> str:
    """Status line text for a loaded filter."""
    corpora = spam_filter.scorer.corpora
    spam = len(corpora.spam) if corpora is not None else 0
    human = len(corpora.human) if corpora is not None else 0
    return (
        f"Ready - {spam} spam / {human} human reference messages, "
        f"threshold {spam_filter.threshold}"
    )


class ClassifyScreen(Screen):
    """
    Screen for classifying messages one at a time.

    If no SpamFilter is passed in, one is built from the config's data
    paths after the screen mounts. Until then, input is disabled.
    """

    BINDINGS = [
        Binding("ctrl+l", "clear", "Clear"),
        Binding("escape", "focus_input", "Focus input", show=False),
    ]

    CSS = """
    #instructions {
        height: auto;
        padding: 0 1;
        border-bottom: solid $primary;
    }

    #results {
        height: 1fr;
    }

    #message-input {
        margin: 0 1;
    }

    #status-line {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }
    """

    def __init__(
        self,
        config: Config | None = None,
        spam_filter: SpamFilter | None = None,
    ) -> None:
        """
        Initialize the classify screen.

        Args:
            config: Application configuration. Defaults if None.
            spam_filter: Pre-loaded filter. Loaded from config if None.
        """
        super().__init__()
        self.config = config or Config()
        self.spam_filter = spam_filter

    def compose(self) -> ComposeResult:
        """
        Compose the screen layout.

        +--------------------------------------------------+
        |                    Header                        |
        +--------------------------------------------------+
        | Instructions                                     |
        +--------------------------------------------------+
        | Result log                                       |
        +--------------------------------------------------+
        | > message input                                  |
        | Status                                           |
        +--------------------------------------------------+
        |                    Footer                        |
        +--------------------------------------------------+
        """
        yield Header()
        with Vertical():
            yield Static(INSTRUCTIONS, id="instructions")
            yield ResultLog(id="results", show_tokens=self.config.ui.show_tokens)
            yield Input(
                placeholder="Input your text or 0...",
                id="message-input",
                disabled=self.spam_filter is None,
            )
            yield Static("Ready", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        """Load reference data if needed, then focus the input."""
        if self.spam_filter is None:
            self.update_status("Loading reference data...")
            self._load_filter()
        else:
            self._on_filter_ready(self.spam_filter)

    def update_status(self, text: str) -> None:
        """Update the status line."""
        self.query_one("#status-line", Static).update(text)

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    @work(thread=True, exclusive=True, name="load-data")
    def _load_filter(self) -> None:
        """Background worker that builds the SpamFilter from config."""
        try:
            spam_filter = SpamFilter.from_config(self.config)
        except SpamScoreError as e:
            logger.error(f"Could not load reference data: {e}")
            self.app.call_from_thread(self._on_filter_failed, str(e))
            return
        self.app.call_from_thread(self._on_filter_ready, spam_filter)

    def _on_filter_ready(self, spam_filter: SpamFilter) -> None:
        self.spam_filter = spam_filter
        self.update_status(describe_filter(spam_filter))
        message_input = self.query_one("#message-input", Input)
        message_input.disabled = False
        message_input.focus()

    def _on_filter_failed(self, error: str) -> None:
        self.update_status("Reference data not loaded - check --paths and the config file")
        self.notify(error, title="Load failed", severity="error", timeout=10)

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter in the message input."""
        if event.input.id != "message-input":
            return

        text = event.value.strip()
        if text == EXIT_COMMAND:
            self.app.exit()
            return

        if not text:
            self.notify("Please enter a non-empty message.", severity="warning")
            return

        event.input.value = ""
        self._classify(text)

    @work(thread=True, name="classify")
    def _classify(self, text: str) -> None:
        """Background worker that scores one message."""
        if self.spam_filter is None:
            return
        try:
            result = self.spam_filter.classify(text)
        except SpamScoreError as e:
            logger.error(f"Classification failed: {e}")
            self.app.call_from_thread(
                self.notify, str(e), title="Error", severity="error"
            )
            return
        self.app.call_from_thread(self._show_result, text, result)

    def _show_result(self, text: str, result: Classification) -> None:
        self.query_one("#results", ResultLog).add_result(text, result)
        self.update_status(f"Last score: {result.score:.4f} ({result.label.value})")

    # -------------------------------------------------------------------------
    # Actions
    # -------------------------------------------------------------------------

    def action_clear(self) -> None:
        """Clear the result log."""
        self.query_one("#results", ResultLog).clear_results()
        self.update_status("Cleared")

    def action_focus_input(self) -> None:
        """Move focus back to the message input."""
        self.query_one("#message-input", Input).focus()
