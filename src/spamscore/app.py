# =============================================================================
# spamscore Main Application
# =============================================================================
# The Textual application class and the command-line entry point.
#
# Two ways to run:
#   - spamscore                 Interactive TUI: type messages, see scores
#   - spamscore --text "..."    One-shot: print score and verdict, then exit
#
# Both load the same configuration and reference data. Logging goes to a
# file in the XDG state directory, since the TUI owns the terminal.
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from spamscore import __version__, __app_name__
from spamscore.config import Config, ConfigError, ensure_directories, print_paths
from spamscore.core import SpamScoreError
from spamscore.spam.filter import SpamFilter
from spamscore.ui.screens.classify import ClassifyScreen

logger = logging.getLogger(__name__)


class SpamScoreApp(App):
    """
    The main spamscore application.

    Attributes:
        config: The loaded application configuration.
        spam_filter: Pre-loaded filter, or None to load it on startup.
    """

    # Application metadata
    TITLE = "spamscore"
    SUB_TITLE = "Frequency-ratio spam classifier"

    # Global keybindings - these work from any screen. Letters are left
    # alone so they can be typed into the message input.
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("f1", "show_help", "Help"),
    ]

    def __init__(
        self,
        config: Config | None = None,
        spam_filter: SpamFilter | None = None,
    ) -> None:
        """
        Initialize the spamscore application.

        Args:
            config: Optional pre-loaded configuration. If not provided,
                    configuration will be loaded from the default location.
            spam_filter: Optional pre-loaded filter (used by tests and by
                         main() so load errors are reported before the TUI starts).
        """
        super().__init__()

        # Initialize config error tracking
        self._config_error: str | None = None

        # Load configuration if not provided
        if config is None:
            try:
                self.config = Config.load()
            except ConfigError as e:
                self.config = Config()
                self._config_error = str(e)
        else:
            self.config = config

        self.spam_filter = spam_filter

    async def on_mount(self) -> None:
        """Called when the application is mounted and ready."""
        self.theme = "textual-light" if self.config.ui.theme == "light" else "textual-dark"

        # Check for config errors
        if self._config_error:
            self.notify(
                f"Config error: {self._config_error}",
                severity="error",
                timeout=10,
            )

        await self.push_screen(ClassifyScreen(self.config, self.spam_filter))

    # -------------------------------------------------------------------------
    # Action Handlers
    # -------------------------------------------------------------------------

    def action_quit(self) -> None:
        """Quit the application."""
        self.exit()

    def action_show_help(self) -> None:
        """Show the keybindings."""
        self.notify(
            "Keybindings: Enter=classify, Ctrl+L=clear, Esc=focus input, Ctrl+Q or 0=quit",
            timeout=10,
        )


# =============================================================================
# CLI Entry Point
# =============================================================================

def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="spamscore: classify short messages as spam or human",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--paths",
        action="store_true",
        help="Print configuration and data paths and exit",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--dataset",
        type=Path,
        help="Labeled CSV file (overrides data.dataset_path)",
    )

    parser.add_argument(
        "--stopwords",
        type=Path,
        help="Stop word list, one per line (overrides data.stopwords_path)",
    )

    parser.add_argument(
        "--threshold",
        type=float,
        help="Spam threshold (overrides scoring.threshold)",
    )

    parser.add_argument(
        "--text",
        help="Classify this text, print the result and exit",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """
    Send log records to a file.

    Args:
        debug: Log at DEBUG instead of INFO.
        log_file: Where to write. Defaults to the XDG state directory.
    """
    log_file = log_file or Config.log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Apply command-line overrides on top of the loaded config."""
    if args.dataset:
        config.data.dataset_path = str(args.dataset)
    if args.stopwords:
        config.data.stopwords_path = str(args.stopwords)
    if args.threshold is not None:
        config.scoring.threshold = args.threshold
    return config


def classify_once(spam_filter: SpamFilter, text: str) -> int:
    """
    Classify one message and print the result, console style.

    Returns:
        Exit code: 0 for human, 2 for spam, 1 for an empty message.
    """
    if not text.strip():
        print("Please enter a non-empty message.", file=sys.stderr)
        return 1

    result = spam_filter.classify(text)
    print(f"Score: {result.score}")
    print(f"{result.label.tag} This text is classified as {result.label.value}.")
    return 2 if result.is_spam else 0


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for spamscore.

    This function:
        1. Parses command-line arguments
        2. Handles special commands (--paths, --version)
        3. Loads configuration and reference data
        4. Classifies --text, or starts the Textual application

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    args = parse_args(argv)

    try:
        config = Config.load(args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 1
    config = apply_overrides(config, args)

    # Handle --paths flag
    if args.paths:
        print_paths(config)
        return 0

    ensure_directories()
    setup_logging(args.debug)
    logger.info(f"Starting {__app_name__} {__version__}")

    # Load reference data up front so errors land on the terminal
    try:
        spam_filter = SpamFilter.from_config(config)
    except SpamScoreError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.text is not None:
        return classify_once(spam_filter, args.text)

    # Create and run the application
    app = SpamScoreApp(config=config, spam_filter=spam_filter)
    app.run()

    print()
    print("Program has ended. Thank you for using the Spam Classifier.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
