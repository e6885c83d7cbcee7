# =============================================================================
# UI Screens
# =============================================================================
# Full-screen views for the application.
#
#   - ClassifyScreen: Enter messages and see their scores
# =============================================================================

from spamscore.ui.screens.classify import ClassifyScreen

__all__ = ["ClassifyScreen"]
