# =============================================================================
# UI Module
# =============================================================================
# Textual-based user interface for spamscore.
#
# Structure:
#   - screens/: Full-screen views (classify)
#   - widgets/: Reusable UI components (result log)
# =============================================================================

from spamscore.ui.screens.classify import ClassifyScreen
from spamscore.ui.widgets.result_log import ResultLog

__all__ = [
    "ClassifyScreen",
    "ResultLog",
]
