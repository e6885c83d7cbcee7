# =============================================================================
# spamscore Core Module
# =============================================================================
# Domain types shared by every other part of spamscore. These are plain
# dataclasses and enums with no external dependencies, so they can be
# imported anywhere without causing circular imports.
#
#   - Label: The binary verdict (spam or human)
#   - ReferenceCorpora: The two labeled sets of reference documents
#   - Classification: The result of classifying one message
#   - Errors: The exception hierarchy
# =============================================================================

from spamscore.core.corpus import Classification, Document, Label, ReferenceCorpora
from spamscore.core.errors import (
    ConfigurationError,
    CorpusError,
    DatasetError,
    SpamScoreError,
)

__all__ = [
    "Classification",
    "Document",
    "Label",
    "ReferenceCorpora",
    "SpamScoreError",
    "ConfigurationError",
    "CorpusError",
    "DatasetError",
]
