"""Allow ``python -m strictjson``."""

import sys

from strictjson.cli import main

sys.exit(main())
