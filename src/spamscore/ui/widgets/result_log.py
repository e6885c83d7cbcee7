# =============================================================================
# Result Log Widget
# =============================================================================
# Shows every message classified in this session, newest at the bottom:
#
#   > Congratulations! You've won a free cruise
#     Score: 1.2734  [SPAM] This text is classified as spam.
#     tokens: congratulations, won, free, cruise
# =============================================================================

from rich.markup import escape
from textual.widgets import RichLog

from spamscore.core import Classification, Label


# Colour for each verdict
LABEL_STYLES = {
    Label.SPAM: "bold red",
    Label.HUMAN: "bold green",
}


class ResultLog(RichLog):
    """
    A scrolling log of classification results.

    Usage:
        >>> log = ResultLog()
        >>> log.add_result("Hi mum", classification)

    Attributes:
        results: (text, classification) pairs in the order they were added.
        show_tokens: Whether to print the normalized tokens under each result.
    """

    DEFAULT_CSS = """
    ResultLog {
        padding: 0 1;
    }
    """

    def __init__(self, *, show_tokens: bool = True, **kwargs) -> None:
        """
        Initialize the result log.

        Args:
            show_tokens: Print the normalized tokens under each result.
            **kwargs: Additional arguments passed to RichLog.
        """
        super().__init__(markup=True, wrap=True, **kwargs)
        self.show_tokens = show_tokens
        self.results: list[tuple[str, Classification]] = []

    def add_result(self, text: str, result: Classification) -> None:
        """
        Append one classified message to the log.

        Args:
            text: The message as the user typed it.
            result: Its classification.
        """
        self.results.append((text, result))

        style = LABEL_STYLES[result.label]
        lines = [
            f"[bold]>[/] {escape(text)}",
            f"  Score: {result.score}  "
            f"[{style}]{escape(result.label.tag)}[/] "
            f"This text is classified as {result.label.value}.",
        ]
        if result.is_empty:
            lines.append("  [dim]No usable words after removing numbers and stop words[/]")
        elif self.show_tokens:
            lines.append(f"  [dim]tokens: {escape(', '.join(result.tokens))}[/]")

        self.write("\n".join(lines))
        self.write("")

    def clear_results(self) -> None:
        """Clear the log and its history."""
        self.results.clear()
        self.clear()
