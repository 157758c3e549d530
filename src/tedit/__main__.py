"""Allow ``python -m tedit``."""

import sys

from tedit.adapters.textual.app import main

sys.exit(main())
