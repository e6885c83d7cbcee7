# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the spamscore test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from spamscore.core import ReferenceCorpora
from spamscore.spam import Normalizer, Scorer, SpamFilter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def xdg_dirs(temp_dir, monkeypatch):
    """Point every XDG directory at the temp dir."""
    for var in ("XDG_CONFIG_HOME", "XDG_STATE_HOME"):
        monkeypatch.setenv(var, str(temp_dir / var.lower()))
    return temp_dir


@pytest.fixture
def stopwords():
    """A small stop word set."""
    return frozenset({"a", "the", "to", "you", "at", "and", "of", "is", "i", "my", "your"})


@pytest.fixture
def normalizer(stopwords):
    """A Normalizer with the small stop word set."""
    return Normalizer(stopwords)


@pytest.fixture
def sample_corpora():
    """Tiny balanced reference corpora."""
    return ReferenceCorpora.from_documents(
        spam=[
            ["win", "free", "prize", "now"],
            ["free", "entry", "claim", "cash"],
            ["urgent", "call", "claim", "prize"],
        ],
        human=[
            ["see", "tomorrow", "lunch"],
            ["mum", "home", "soon"],
            ["call", "later", "ok"],
        ],
    )


@pytest.fixture
def scorer(sample_corpora):
    """A Scorer over the sample corpora with the default threshold."""
    return Scorer(sample_corpora)


@pytest.fixture
def spam_filter(normalizer, scorer):
    """A ready-to-use SpamFilter."""
    return SpamFilter(normalizer, scorer)


@pytest.fixture
def stopwords_file(temp_dir):
    """A stop word file with mixed case and blank lines."""
    path = temp_dir / "stopwords.txt"
    path.write_text("a\nThe\n\nto\nyou\nat\nAND\nof\n", encoding="utf-8")
    return path


@pytest.fixture
def dataset_file(temp_dir):
    """A small labeled CSV in the SMS spam collection format."""
    path = temp_dir / "spam.csv"
    path.write_text(
        "v1,v2,,,\n"
        'ham,"Hi mum, home soon",,,\n'
        "spam,WIN a FREE prize now,,,\n"
        "ham,See you at 5,,,\n"
        "spam,Call 08001234567 to claim your cash,,,\n"
        "ham,the and of,,,\n"
        "ham,Lunch tomorrow?,,,\n"
        "unknown,whatever,,,\n",
        encoding="latin-1",
    )
    return path
