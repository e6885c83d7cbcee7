# =============================================================================
# spamscore Entry Point for `python -m spamscore`
# =============================================================================
# This module allows spamscore to be run as a Python module:
#
#   python -m spamscore
#
# This is equivalent to running the 'spamscore' command after installation.
# =============================================================================

import sys

from spamscore.app import main

if __name__ == "__main__":
    sys.exit(main())
