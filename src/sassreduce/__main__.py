"""Allow ``python -m sassreduce``."""

import sys

from sassreduce.cli import main

sys.exit(main())
