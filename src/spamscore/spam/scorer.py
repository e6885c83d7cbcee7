# =============================================================================
# Frequency-Ratio Spam Scorer
# =============================================================================
# Scores a message by comparing its token frequencies against every
# reference document.
#
# How it works:
#   1. For each token position in the message, take the token's share of
#      the message:        text_ratio = count(w, message) / len(message)
#   2. Compare it against each reference document's share of that token:
#        spam docs add     text_ratio * count(w, doc) / len(doc)
#        human docs add    text_ratio * -count(w, doc) / len(doc)
#   3. Sum everything. Above the threshold means spam.
#
# This is a signed dot product, not a probability - the score ranges over
# all reals. The outer loop runs once per token *occurrence*, so a word
# repeated in the message counts once for each repetition. That weighting
# is intentional and must not be "fixed" to unique tokens.
# =============================================================================

import logging
from collections import Counter
from collections.abc import Sequence

from spamscore.core.corpus import Classification, Document, Label, ReferenceCorpora
from spamscore.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Chosen experimentally against the SMS spam collection
DEFAULT_THRESHOLD = 0.7787889031513116


def _profiles(documents: Sequence[Document]) -> list[tuple[Counter[str], int]]:
    """Precompute (token counts, length) for each document."""
    return [(Counter(doc), len(doc)) for doc in documents]


def _accumulate(
    tokens: Sequence[str],
    spam: list[tuple[Counter[str], int]],
    human: list[tuple[Counter[str], int]],
) -> float:
    score = 0.0
    if not tokens:
        return score

    text_counts = Counter(tokens)
    text_length = len(tokens)

    # Once per position, not once per unique token
    for word in tokens:
        text_ratio = text_counts[word] / text_length
        for counts, length in human:
            human_ratio = -1 * counts[word] / length
            score += text_ratio * human_ratio
        for counts, length in spam:
            spam_ratio = counts[word] / length
            score += text_ratio * spam_ratio

    return score


def compute_score(
    tokens: Sequence[str],
    spam_corpus: Sequence[Sequence[str]],
    human_corpus: Sequence[Sequence[str]],
) -> float:
    """
    Compute the spam similarity score of a token list.

    Args:
        tokens: Normalized tokens of the candidate message.
        spam_corpus: Reference spam documents. May be empty.
        human_corpus: Reference human documents. May be empty.

    Returns:
        The score. 0.0 for an empty token list.

    Example:
        >>> round(compute_score(["free", "money", "free"],
        ...                     [["free", "money"]], [["hello", "friend"]]), 6)
        0.833333
    """
    return _accumulate(
        tokens,
        _profiles([tuple(doc) for doc in spam_corpus]),
        _profiles([tuple(doc) for doc in human_corpus]),
    )


def is_spam_text(score: float, threshold: float = DEFAULT_THRESHOLD) -> bool:
    """Returns True if score is strictly above threshold."""
    return score > threshold


class Scorer:
    """
    Scores and labels messages against a fixed pair of reference corpora.

    Token counts for every reference document are computed once, when
    the scorer is created, and reused for each message after that.

    Usage:
        >>> scorer = Scorer(corpora)
        >>> result = scorer.classify(normalizer.preprocess("WIN a FREE prize"))
        >>> if result.is_spam:
        ...     print(f"Spam! score={result.score:.3f}")

    Attributes:
        corpora: The reference corpora, or None if not loaded.
        threshold: Scores strictly above this are spam.
    """

    def __init__(
        self,
        corpora: ReferenceCorpora | None = None,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> None:
        """
        Initialize the scorer.

        Args:
            corpora: Reference corpora. None means "not loaded yet".
            threshold: Classification threshold.
        """
        self.corpora = corpora
        self.threshold = threshold

        self._spam_profiles: list[tuple[Counter[str], int]] = []
        self._human_profiles: list[tuple[Counter[str], int]] = []
        if corpora is not None:
            self._spam_profiles = _profiles(corpora.spam)
            self._human_profiles = _profiles(corpora.human)
            if corpora.is_empty:
                logger.warning("Reference corpora are empty - every score will be 0.0")
            elif not corpora.is_balanced:
                logger.warning(
                    f"Reference corpora are unbalanced: {len(corpora.spam)} spam, "
                    f"{len(corpora.human)} human"
                )

    @property
    def is_loaded(self) -> bool:
        """Returns True if reference corpora have been provided."""
        return self.corpora is not None

    def compute_score(self, tokens: Sequence[str]) -> float:
        """
        Compute the spam similarity score of a token list.

        Raises:
            ConfigurationError: If no corpora were loaded.
        """
        if self.corpora is None:
            raise ConfigurationError(
                "Reference corpora not loaded - load a dataset before scoring"
            )
        return _accumulate(tokens, self._spam_profiles, self._human_profiles)

    def is_spam_text(self, score: float) -> bool:
        """Returns True if score exceeds this scorer's threshold."""
        return is_spam_text(score, self.threshold)

    def label_for(self, score: float) -> Label:
        """Map a score to a Label."""
        return Label.SPAM if self.is_spam_text(score) else Label.HUMAN

    def classify(self, tokens: Sequence[str]) -> Classification:
        """
        Score a token list and label it.

        Args:
            tokens: Normalized tokens, usually from Normalizer.preprocess().

        Returns:
            Classification holding the tokens, score and label.
        """
        score = self.compute_score(tokens)
        label = self.label_for(score)
        logger.debug(f"Scored {len(tokens)} tokens: {score:.6f} -> {label.value}")
        return Classification(
            tokens=tuple(tokens),
            score=score,
            label=label,
            threshold=self.threshold,
        )
