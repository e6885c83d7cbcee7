# =============================================================================
# Spam Filter
# =============================================================================
# Ties the Normalizer and Scorer together: raw text in, Classification out.
#
# A SpamFilter owns all of the reference state (stop words and corpora),
# and all of it is immutable once loaded. The UI builds one at startup
# and calls classify() for every message the user enters.
# =============================================================================

import logging
from typing import TYPE_CHECKING

from spamscore.core.corpus import Classification, ReferenceCorpora
from spamscore.spam.normalizer import Normalizer
from spamscore.spam.scorer import DEFAULT_THRESHOLD, Scorer
from spamscore.storage.dataset import load_corpora
from spamscore.storage.stopwords import load_stopwords

if TYPE_CHECKING:
    from spamscore.config import Config

logger = logging.getLogger(__name__)


class SpamFilter:
    """
    Classifies raw text as spam or human.

    Usage:
        >>> spam_filter = SpamFilter.from_config(Config.load())
        >>> result = spam_filter.classify("WINNER!! Claim your free prize")
        >>> print(result.label.tag, result.score)

    Attributes:
        normalizer: Turns text into tokens.
        scorer: Scores tokens against the reference corpora.
    """

    def __init__(self, normalizer: Normalizer, scorer: Scorer) -> None:
        self.normalizer = normalizer
        self.scorer = scorer

    @classmethod
    def from_data(
        cls,
        stopwords: frozenset[str],
        corpora: ReferenceCorpora,
        threshold: float = DEFAULT_THRESHOLD,
    ) -> "SpamFilter":
        """Build a filter from already-loaded reference data."""
        return cls(Normalizer(stopwords), Scorer(corpora, threshold))

    @classmethod
    def from_config(cls, config: "Config") -> "SpamFilter":
        """
        Load stop words and the labeled dataset named in config.

        Raises:
            DatasetError: If either file can't be read, or the dataset
                          has no usable messages for one label.
        """
        data = config.data
        normalizer = Normalizer(load_stopwords(data.stopwords_file))
        corpora = load_corpora(
            data.dataset_file,
            normalizer,
            spam_label=data.spam_label,
            ham_label=data.ham_label,
            encoding=data.encoding,
            seed=data.seed,
        )
        logger.info(
            f"Spam filter ready: {len(corpora.spam)} spam, {len(corpora.human)} human "
            f"reference messages, threshold {config.scoring.threshold}"
        )
        return cls(normalizer, Scorer(corpora, config.scoring.threshold))

    @property
    def threshold(self) -> float:
        return self.scorer.threshold

    def classify(self, text: str | None) -> Classification:
        """
        Preprocess text, score it and label it.

        Empty text gives an empty Classification (score 0.0, HUMAN)
        rather than an error; check result.is_empty.

        Raises:
            ConfigurationError: If stop words or corpora were never loaded.
        """
        tokens = self.normalizer.preprocess(text)
        return self.scorer.classify(tokens)
