# =============================================================================
# SpamFilter Tests
# =============================================================================

import pytest

from spamscore.config import Config
from spamscore.core import ConfigurationError, DatasetError, Label
from spamscore.spam import Normalizer, Scorer, SpamFilter


def test_classify_spam(spam_filter):
    result = spam_filter.classify("FREE FREE prize!! Claim your FREE prize")
    assert result.label is Label.SPAM
    assert result.tokens == ("free", "free", "prize", "claim", "free", "prize")
    assert result.score == pytest.approx(3 * 0.5 * 0.5 + 2 * (1 / 3) * 0.5 + (1 / 6) * 0.5)


def test_classify_human(spam_filter):
    result = spam_filter.classify("See you tomorrow for lunch")
    assert result.label is Label.HUMAN
    assert result.score < 0


def test_classify_empty_text(spam_filter):
    result = spam_filter.classify("   ")
    assert result.is_empty
    assert result.score == 0.0
    assert result.label is Label.HUMAN


def test_missing_reference_data_raises(sample_corpora, stopwords):
    with pytest.raises(ConfigurationError):
        SpamFilter(Normalizer(), Scorer(sample_corpora)).classify("free prize")
    with pytest.raises(ConfigurationError):
        SpamFilter(Normalizer(stopwords), Scorer()).classify("free prize")


def test_from_data(stopwords, sample_corpora):
    spam_filter = SpamFilter.from_data(stopwords, sample_corpora, threshold=5.0)
    assert spam_filter.threshold == 5.0
    assert not spam_filter.classify("free prize free prize").is_spam


def test_from_config(dataset_file, stopwords_file):
    config = Config()
    config.data.dataset_path = str(dataset_file)
    config.data.stopwords_path = str(stopwords_file)
    config.scoring.threshold = 0.2

    spam_filter = SpamFilter.from_config(config)
    corpora = spam_filter.scorer.corpora
    assert corpora.is_balanced
    assert len(corpora.spam) == 2
    assert spam_filter.threshold == 0.2
    assert spam_filter.classify("win a free prize").is_spam


def test_from_config_missing_dataset(temp_dir):
    config = Config()
    config.data.dataset_path = str(temp_dir / "missing.csv")
    with pytest.raises(DatasetError):
        SpamFilter.from_config(config)
