# =============================================================================
# Stop Word Loading
# =============================================================================
# Stop words are plain text, one per line. A default English list ships
# with the package (the NLTK list, via https://gist.github.com/sebleier/554280)
# so spamscore works out of the box; a custom list can be set in config.
# =============================================================================

import logging
from pathlib import Path

from spamscore.core.errors import DatasetError

logger = logging.getLogger(__name__)


def bundled_stopwords_path() -> Path:
    """Returns the path to the stop word list shipped with spamscore."""
    return Path(__file__).parent.parent / "data" / "stopwords.txt"


def load_stopwords(path: Path | None = None) -> frozenset[str]:
    """
    Load a stop word list.

    Args:
        path: Text file with one stop word per line. Uses the bundled
              list if None.

    Returns:
        Lowercased stop words. Blank lines are skipped.

    Raises:
        DatasetError: If the file can't be read.
    """
    path = path or bundled_stopwords_path()

    try:
        with open(path, encoding="utf-8") as f:
            words = frozenset(
                line.strip().lower() for line in f if line.strip()
            )
    except (OSError, UnicodeDecodeError) as e:
        raise DatasetError(f"Error reading stop words from {path}: {e}") from e

    logger.info(f"Loaded {len(words)} stop words from {path}")
    return words
