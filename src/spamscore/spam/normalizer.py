# =============================================================================
# Text Normalizer
# =============================================================================
# Converts raw message text into the token lists the scorer works with.
#
# The pipeline is deliberately small:
#   1. Split on runs of non-word characters (\W+, ASCII)
#   2. Drop empty tokens and tokens that are only digits
#   3. Lowercase what's left
#   4. Remove stop words
#
# Order and duplicates are kept - the scorer counts how often each token
# appears, so "free free money" must stay three tokens long.
# =============================================================================

import logging
import re
from collections.abc import Iterable

from spamscore.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Word characters are [a-zA-Z0-9_]; anything else separates tokens
SPLIT_PATTERN = re.compile(r"\W+", re.ASCII)

# Tokens made only of digits are noise (phone numbers, prices, codes)
NUMERIC_PATTERN = re.compile(r"\d+", re.ASCII)


def tokenize(text: str) -> list[str]:
    """
    Split text into lowercase word tokens.

    Args:
        text: Input text. Empty or whitespace-only text is fine.

    Returns:
        Tokens in their original order, duplicates kept. Never contains
        empty or purely numeric tokens.

    Example:
        >>> tokenize("Call 555-0199 NOW, win $500!")
        ['call', 'now', 'win']
    """
    tokens = []
    for token in SPLIT_PATTERN.split(text):
        if not token or NUMERIC_PATTERN.fullmatch(token):
            continue
        tokens.append(token.lower())
    return tokens


class Normalizer:
    """
    Tokenizes text and removes stop words.

    The stop word set is handed in at construction and never changes.
    A Normalizer built without one can still tokenize, but anything that
    needs stop words raises ConfigurationError straight away.

    Usage:
        >>> normalizer = Normalizer(frozenset({"the", "a"}))
        >>> normalizer.preprocess("The cat ate a mouse")
        ['cat', 'ate', 'mouse']

    Attributes:
        stopwords: The stop words to remove, or None if not loaded.
    """

    def __init__(self, stopwords: Iterable[str] | None = None) -> None:
        """
        Initialize the normalizer.

        Args:
            stopwords: Lowercase stop words. None means "not loaded yet".
        """
        self.stopwords: frozenset[str] | None = (
            frozenset(stopwords) if stopwords is not None else None
        )

    @property
    def is_loaded(self) -> bool:
        """Returns True if a stop word set has been provided."""
        return self.stopwords is not None

    def tokenize(self, text: str) -> list[str]:
        """Split text into lowercase word tokens. See tokenize()."""
        return tokenize(text)

    def remove_stopwords(self, tokens: Iterable[str]) -> list[str]:
        """
        Return a new list with every stop word removed.

        Matching is exact and case-sensitive; tokens from tokenize() are
        already lowercase. Surviving tokens keep their relative order.

        Raises:
            ConfigurationError: If no stop word set was loaded.
        """
        stopwords = self._require_stopwords()
        return [token for token in tokens if token not in stopwords]

    def preprocess(self, text: str | None) -> list[str]:
        """
        Tokenize text and remove stop words.

        None or blank text is not an error: a warning is logged and an
        empty list returned, so the caller can decide what to do next.

        Raises:
            ConfigurationError: If no stop word set was loaded. Checked
                before looking at the text, so it is never masked by an
                empty message.
        """
        self._require_stopwords()

        if text is None or not text.strip():
            logger.warning("Null or empty text passed to preprocess")
            return []

        return self.remove_stopwords(self.tokenize(text))

    def _require_stopwords(self) -> frozenset[str]:
        if self.stopwords is None:
            raise ConfigurationError(
                "Stop words not loaded - load a stop word list before preprocessing"
            )
        return self.stopwords
