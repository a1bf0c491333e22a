# =============================================================================
# SpamScope Entry Point for `python -m spamscope`
# =============================================================================
# This module allows SpamScope to be run as a Python module:
#
#   python -m spamscope
#
# This is equivalent to running the 'spamscope' command after installation.
# =============================================================================

import sys

from spamscope.app import main

if __name__ == "__main__":
    sys.exit(main())
