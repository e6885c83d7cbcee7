# =============================================================================
# Spam Module
# =============================================================================
# Frequency-ratio spam scoring.
#
# Unlike a trained classifier, this one:
#   - Has no model to fit - it compares directly against reference messages
#   - Gives a signed, unbounded score instead of a probability
#   - Is fully deterministic for a given corpus and threshold
#
# The Normalizer turns text into tokens; the Scorer compares those tokens
# against the spam and human reference corpora.
# =============================================================================

from spamscore.spam.normalizer import Normalizer, tokenize
from spamscore.spam.scorer import DEFAULT_THRESHOLD, Scorer, compute_score, is_spam_text
from spamscore.spam.filter import SpamFilter

__all__ = [
    "DEFAULT_THRESHOLD",
    "Normalizer",
    "Scorer",
    "SpamFilter",
    "compute_score",
    "is_spam_text",
    "tokenize",
]
