# =============================================================================
# Exceptions
# =============================================================================
# Every error spamscore raises on purpose derives from SpamScoreError, so
# callers can catch the whole family in one place.
#
# Empty input is NOT an error: the normalizer logs a warning and returns
# an empty token list. Missing reference data IS an error, and it is raised
# as soon as it's noticed - a silently empty stopword set or corpus would
# skew every score computed afterwards.
# =============================================================================


class SpamScoreError(Exception):
    """Base class for all spamscore errors."""
    pass


class ConfigurationError(SpamScoreError):
    """Raised when stopwords or reference corpora are used before loading."""
    pass


class CorpusError(SpamScoreError, ArithmeticError):
    """
    Raised when a reference corpus breaks the scoring invariants.

    The only case today is an empty document: its length is a divisor
    in the score, so it can never be allowed into a corpus.
    """
    pass


class DatasetError(SpamScoreError):
    """Raised when a stopword list or labeled dataset can't be read."""
    pass
