# =============================================================================
# UI Widgets
# =============================================================================
# Reusable UI components.
#
#   - ResultLog: Scrolling history of classified messages
# =============================================================================

from spamscore.ui.widgets.result_log import ResultLog

__all__ = ["ResultLog"]
