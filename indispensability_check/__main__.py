import sys

from indispensability_check.cli import main

sys.exit(main())
