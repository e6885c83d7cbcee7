# =============================================================================
# Corpus and Classification Models
# =============================================================================
# A Document is the normalized token list of one message. Reference
# documents are grouped into two corpora, one per label, and every
# candidate message is compared against all of them.
#
# The corpora are loaded once at startup and never change afterwards,
# so they're stored as tuples inside a frozen dataclass. That makes them
# safe to share between the UI and worker threads without locking.
# =============================================================================

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum

from spamscore.core.errors import CorpusError

# One message after normalization: lowercase tokens, order and duplicates kept
Document = tuple[str, ...]


class Label(str, Enum):
    """
    The verdict for a classified message.

    The values match the default labels used in the SMS spam dataset,
    except that "ham" is called HUMAN in the UI.
    """
    SPAM = "spam"
    HUMAN = "human"

    @property
    def tag(self) -> str:
        """Short bracketed tag used in console output, e.g. "[SPAM]"."""
        return f"[{self.name}]"


def _freeze(documents: Iterable[Sequence[str]], name: str) -> tuple[Document, ...]:
    """Copy documents into tuples, rejecting empty ones."""
    frozen = []
    for index, document in enumerate(documents):
        doc = tuple(document)
        if not doc:
            raise CorpusError(
                f"Empty document at position {index} in {name} corpus "
                "(empty messages must be filtered out before loading)"
            )
        frozen.append(doc)
    return tuple(frozen)


@dataclass(frozen=True)
class ReferenceCorpora:
    """
    The two labeled reference corpora used for scoring.

    Attributes:
        spam: Documents known to be spam.
        human: Documents known to be written by humans (ham).

    Every document is non-empty; that is checked on construction because
    a document's length divides its token counts during scoring.

    Example:
        >>> corpora = ReferenceCorpora.from_documents(
        ...     spam=[["free", "money"]],
        ...     human=[["hello", "friend"]],
        ... )
        >>> corpora.is_balanced
        True
    """
    spam: tuple[Document, ...] = ()
    human: tuple[Document, ...] = ()

    def __post_init__(self) -> None:
        # Normalize any sequence input to tuples and validate in one pass
        object.__setattr__(self, "spam", _freeze(self.spam, "spam"))
        object.__setattr__(self, "human", _freeze(self.human, "human"))

    @classmethod
    def from_documents(
        cls,
        spam: Iterable[Sequence[str]],
        human: Iterable[Sequence[str]],
    ) -> "ReferenceCorpora":
        """Build corpora from any iterables of token sequences."""
        return cls(spam=tuple(spam), human=tuple(human))

    @property
    def is_balanced(self) -> bool:
        """True if both corpora hold the same number of documents."""
        return len(self.spam) == len(self.human)

    @property
    def is_empty(self) -> bool:
        """True if there is nothing to compare against."""
        return not self.spam and not self.human

    def __len__(self) -> int:
        return len(self.spam) + len(self.human)


@dataclass(frozen=True)
class Classification:
    """
    The result of classifying one message.

    Attributes:
        tokens: The normalized tokens the score was computed from.
        score: Similarity to spam. Unbounded; higher is more spam-like.
        label: SPAM if score exceeded the threshold, otherwise HUMAN.
        threshold: The threshold the label was decided with.

    An empty token list is a legal result (the message had no usable
    words); its score is always 0.0. Check is_empty to tell it apart
    from a message that genuinely scored zero.
    """
    tokens: tuple[str, ...]
    score: float
    label: Label
    threshold: float = field(default=0.0, compare=False)

    @property
    def is_spam(self) -> bool:
        """True if the message was classified as spam."""
        return self.label is Label.SPAM

    @property
    def is_empty(self) -> bool:
        """True if the message produced no tokens."""
        return not self.tokens
