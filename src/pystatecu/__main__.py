"""Allow ``python -m pystatecu``."""

import sys

from pystatecu.cli import main

sys.exit(main())
