# =============================================================================
# Core Model Tests
# =============================================================================

import pytest

from spamscore.core import Classification, CorpusError, Label, ReferenceCorpora


class TestReferenceCorpora:
    def test_documents_are_frozen_to_tuples(self):
        corpora = ReferenceCorpora.from_documents(
            spam=[["free", "money"]],
            human=[["hello", "friend"]],
        )
        assert corpora.spam == (("free", "money"),)
        assert corpora.human == (("hello", "friend"),)

    def test_source_lists_can_change_afterwards(self):
        spam = [["free"]]
        corpora = ReferenceCorpora.from_documents(spam=spam, human=[["hi"]])
        spam[0].append("money")
        spam.append(["more"])
        assert corpora.spam == (("free",),)

    def test_empty_document_is_rejected(self):
        with pytest.raises(CorpusError, match="human"):
            ReferenceCorpora.from_documents(spam=[["free"]], human=[["hi"], []])

    def test_corpus_error_is_an_arithmetic_error(self):
        with pytest.raises(ArithmeticError):
            ReferenceCorpora.from_documents(spam=[[]], human=[])

    def test_balance_and_size(self, sample_corpora):
        assert sample_corpora.is_balanced
        assert len(sample_corpora) == 6
        assert not sample_corpora.is_empty

        unbalanced = ReferenceCorpora.from_documents(spam=[["a"]], human=[])
        assert not unbalanced.is_balanced
        assert ReferenceCorpora().is_empty

    def test_is_immutable(self, sample_corpora):
        with pytest.raises(AttributeError):
            sample_corpora.spam = ()


class TestClassification:
    def test_properties(self):
        result = Classification(tokens=("free",), score=1.5, label=Label.SPAM)
        assert result.is_spam
        assert not result.is_empty

        empty = Classification(tokens=(), score=0.0, label=Label.HUMAN)
        assert empty.is_empty
        assert not empty.is_spam

    def test_label_tag(self):
        assert Label.SPAM.tag == "[SPAM]"
        assert Label.HUMAN.tag == "[HUMAN]"
        assert Label("spam") is Label.SPAM
