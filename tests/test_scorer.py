# =============================================================================
# Scorer Tests
# =============================================================================

import pytest

from spamscore.core import ConfigurationError, Label, ReferenceCorpora
from spamscore.spam import DEFAULT_THRESHOLD, Scorer, compute_score, is_spam_text


def reference_score(tokens, spam_corpus, human_corpus):
    """The scoring loop written out literally, counting with list.count()."""
    score = 0.0
    for word in tokens:
        text_ratio = tokens.count(word) / len(tokens)
        for doc in human_corpus:
            score += text_ratio * (-1 * doc.count(word) / len(doc))
        for doc in spam_corpus:
            score += text_ratio * (doc.count(word) / len(doc))
    return score


class TestComputeScore:
    def test_worked_example(self):
        score = compute_score(
            ["free", "money", "free"],
            [["free", "money"]],
            [["hello", "friend"]],
        )
        # free twice at 2/3 * 1/2, money once at 1/3 * 1/2
        assert score == pytest.approx(2 * (2 / 3) * (1 / 2) + (1 / 3) * (1 / 2))
        assert score == pytest.approx(5 / 6)

    def test_empty_tokens_score_zero(self, sample_corpora):
        assert compute_score([], sample_corpora.spam, sample_corpora.human) == 0.0

    def test_human_documents_pull_the_score_down(self):
        score = compute_score(["hello"], [["free", "money"]], [["hello", "friend"]])
        assert score == pytest.approx(-0.5)

    def test_sums_over_every_document(self):
        score = compute_score(
            ["win"],
            [["win", "cash"], ["win"]],
            [["win", "home", "now", "ok"]],
        )
        assert score == pytest.approx(0.5 + 1.0 - 0.25)

    def test_unknown_words_contribute_nothing(self, sample_corpora):
        score = compute_score(["zebra"], sample_corpora.spam, sample_corpora.human)
        assert score == 0.0

    def test_repeated_words_count_once_per_occurrence(self):
        # Weighted by occurrence: two positions, each with text_ratio 1.0.
        # Iterating unique tokens instead would give 1.0.
        assert compute_score(["free", "free"], [["free"]], [["other"]]) == pytest.approx(2.0)

    def test_matches_literal_loop(self, sample_corpora):
        tokens = ["free", "prize", "call", "later", "free", "cash", "zebra"]
        spam = [list(doc) for doc in sample_corpora.spam]
        human = [list(doc) for doc in sample_corpora.human]
        assert compute_score(tokens, spam, human) == pytest.approx(
            reference_score(tokens, spam, human)
        )

    def test_returns_float(self):
        assert isinstance(compute_score(["a"], [["a"]], [["b"]]), float)


class TestIsSpamText:
    def test_strictly_greater_than_threshold(self):
        assert is_spam_text(0.8, 0.7)
        assert not is_spam_text(0.7, 0.7)
        assert not is_spam_text(-3.0, 0.7)

    def test_default_threshold(self):
        assert DEFAULT_THRESHOLD == 0.7787889031513116
        assert is_spam_text(0.78)
        assert not is_spam_text(0.77)

    @pytest.mark.parametrize("threshold", [-1.0, 0.0, 0.5, DEFAULT_THRESHOLD, 10.0])
    def test_monotonic_in_score(self, threshold):
        scores = [-100.0, -1.0, 0.0, 0.5, 0.77, 0.78, 1.0, 5.0, 100.0]
        verdicts = [is_spam_text(score, threshold) for score in scores]
        # Once spam, always spam as the score increases
        assert verdicts == sorted(verdicts)


class TestScorer:
    def test_compute_score_matches_function(self, scorer, sample_corpora):
        tokens = ["free", "prize", "call", "free"]
        assert scorer.compute_score(tokens) == pytest.approx(
            compute_score(tokens, sample_corpora.spam, sample_corpora.human)
        )

    def test_classify_spam(self, scorer):
        result = scorer.classify(["free", "prize", "free"])
        assert result.label is Label.SPAM
        assert result.is_spam
        assert result.score > DEFAULT_THRESHOLD
        assert result.tokens == ("free", "prize", "free")
        assert result.threshold == DEFAULT_THRESHOLD

    def test_classify_human(self, scorer):
        result = scorer.classify(["lunch", "tomorrow"])
        assert result.label is Label.HUMAN
        assert result.score < 0

    def test_classify_empty(self, scorer):
        result = scorer.classify([])
        assert result.is_empty
        assert result.score == 0.0
        assert result.label is Label.HUMAN

    def test_custom_threshold(self, sample_corpora):
        scorer = Scorer(sample_corpora, threshold=-10.0)
        assert scorer.label_for(-1.0) is Label.SPAM
        assert scorer.label_for(-10.0) is Label.HUMAN

    def test_missing_corpora_fails_fast(self):
        scorer = Scorer()
        assert not scorer.is_loaded
        with pytest.raises(ConfigurationError):
            scorer.compute_score(["free"])
        with pytest.raises(ConfigurationError):
            scorer.classify([])

    def test_unbalanced_corpora_logs_warning(self, caplog):
        corpora = ReferenceCorpora.from_documents(spam=[["a"], ["b"]], human=[["c"]])
        Scorer(corpora)
        assert "unbalanced" in caplog.text

    def test_empty_corpora_logs_warning(self, caplog):
        scorer = Scorer(ReferenceCorpora.from_documents(spam=[], human=[]))
        assert "empty" in caplog.text
        assert scorer.compute_score(["free", "prize"]) == 0.0
