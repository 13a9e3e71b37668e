"""Allow ``python -m testhealth``."""

import sys

from testhealth.cli import main

sys.exit(main())
