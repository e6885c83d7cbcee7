# =============================================================================
# Storage Module
# =============================================================================
# Loads the reference data spamscore needs before it can classify anything:
#
#   - stopwords: A flat text list, one word per line
#   - dataset: A two-column labeled CSV (label, message) that becomes the
#     spam and human reference corpora
#
# Everything here runs once at startup. The results are immutable and are
# handed to the Normalizer and Scorer explicitly.
# =============================================================================

from spamscore.storage.dataset import balance, load_corpora, load_messages
from spamscore.storage.stopwords import bundled_stopwords_path, load_stopwords

__all__ = [
    "balance",
    "bundled_stopwords_path",
    "load_corpora",
    "load_messages",
    "load_stopwords",
]
