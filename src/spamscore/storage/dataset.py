# =============================================================================
# Labeled Dataset Loading
# =============================================================================
# Builds the spam and human reference corpora from a labeled CSV file.
#
# Expected format (the Kaggle SMS Spam Collection, spam.csv):
#
#   v1,v2,,,
#   ham,"Go until jurong point, crazy..",,,
#   spam,Free entry in 2 a wkly comp to win FA Cup final tkts...,,,
#
# The first column is the label; everything after it is the message.
# Rows whose label is neither the spam nor the ham label (such as the
# header row) are skipped, and so are messages that normalize to nothing.
#
# The two corpora are then balanced: each is shuffled with a fixed seed
# and both are cut down to the size of the smaller one, so the spam and
# human sides contribute the same number of documents to every score.
# =============================================================================

import csv
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path

from spamscore.core.corpus import ReferenceCorpora
from spamscore.core.errors import DatasetError
from spamscore.spam.normalizer import Normalizer

logger = logging.getLogger(__name__)

# Seed for the balancing shuffle, so the same dataset always
# produces the same corpora
DEFAULT_SEED = 67


@dataclass
class LabeledMessages:
    """
    Preprocessed messages split by label, before balancing.

    Attributes:
        spam: Token lists of spam messages.
        human: Token lists of human (ham) messages.
        skipped: Rows ignored (unknown label, too few columns, or no tokens).
    """
    spam: list[list[str]] = field(default_factory=list)
    human: list[list[str]] = field(default_factory=list)
    skipped: int = 0


def _message_from_row(row: list[str]) -> str:
    """
    Rejoin the message cells of a CSV row.

    Unquoted commas inside a message split it over several cells, and
    spam.csv pads every row with empty trailing columns; both are undone
    here.
    """
    cells = row[1:]
    while cells and not cells[-1].strip():
        cells.pop()
    return ",".join(cells).strip()


def load_messages(
    path: Path,
    normalizer: Normalizer,
    *,
    spam_label: str = "spam",
    ham_label: str = "ham",
    encoding: str = "utf-8",
) -> LabeledMessages:
    """
    Read and preprocess every labeled message in a CSV file.

    Args:
        path: CSV file with label and message columns.
        normalizer: Normalizer used to preprocess each message.
        spam_label: Label value marking spam rows.
        ham_label: Label value marking human rows.
        encoding: File encoding. spam.csv is latin-1.

    Returns:
        LabeledMessages in file order.

    Raises:
        DatasetError: If the file can't be read or parsed.
        ConfigurationError: If the normalizer has no stop words.
    """
    messages = LabeledMessages()

    try:
        with open(path, encoding=encoding, newline="") as f:
            for row in csv.reader(f):
                if len(row) < 2:
                    messages.skipped += 1
                    continue

                label = row[0].strip()
                if label not in (spam_label, ham_label):
                    messages.skipped += 1
                    continue

                tokens = normalizer.preprocess(_message_from_row(row))
                if not tokens:
                    messages.skipped += 1
                    continue

                if label == spam_label:
                    messages.spam.append(tokens)
                else:
                    messages.human.append(tokens)
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise DatasetError(f"Error reading or parsing {path}: {e}") from e

    logger.info(
        f"Read {len(messages.spam)} spam and {len(messages.human)} human messages "
        f"from {path} ({messages.skipped} rows skipped)"
    )
    return messages


def balance(
    spam: list[list[str]],
    human: list[list[str]],
    seed: int = DEFAULT_SEED,
) -> tuple[list[list[str]], list[list[str]]]:
    """
    Shuffle both corpora and truncate them to the same length.

    Each list is shuffled by its own generator seeded with the same seed,
    so the result only depends on the inputs and the seed.

    Returns:
        New (spam, human) lists of equal length. The inputs are not modified.
    """
    size = min(len(spam), len(human))

    spam = list(spam)
    human = list(human)
    random.Random(seed).shuffle(spam)
    random.Random(seed).shuffle(human)

    return spam[:size], human[:size]


def load_corpora(
    path: Path,
    normalizer: Normalizer,
    *,
    spam_label: str = "spam",
    ham_label: str = "ham",
    encoding: str = "utf-8",
    seed: int = DEFAULT_SEED,
) -> ReferenceCorpora:
    """
    Load a labeled CSV file into balanced reference corpora.

    Raises:
        DatasetError: If the file can't be read, or holds no usable
                      messages for one of the labels.
    """
    messages = load_messages(
        path,
        normalizer,
        spam_label=spam_label,
        ham_label=ham_label,
        encoding=encoding,
    )

    if not messages.spam or not messages.human:
        raise DatasetError(
            f"{path} has no usable messages labeled "
            f"'{spam_label if not messages.spam else ham_label}'"
        )

    spam, human = balance(messages.spam, messages.human, seed)
    logger.info(f"Balanced reference corpora to {len(spam)} documents each")

    return ReferenceCorpora.from_documents(spam=spam, human=human)
