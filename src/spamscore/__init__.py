# =============================================================================
# spamscore: A Frequency-Ratio Spam Classifier
# =============================================================================
#
# spamscore classifies short text messages (SMS, chat) as spam or human by
# comparing their word frequencies against two labeled reference corpora.
#
# Features:
#   - No training step: scores are computed directly from reference messages
#   - Signed, unbounded score with a configurable threshold
#   - Interactive terminal UI (Textual) and a one-shot CLI mode
#   - TOML configuration, XDG Base Directory compliant
#
# =============================================================================

__version__ = "0.1.0"
__app_name__ = "spamscore"

# Main entry point - this is what gets called by the 'spamscore' command
from spamscore.app import main

__all__ = ["main", "__version__", "__app_name__"]
