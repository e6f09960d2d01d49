"""Allow ``python -m overcookied_client``."""

import sys

from .cli import main

sys.exit(main())
