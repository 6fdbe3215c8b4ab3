import sys

from alidval.cli import main

sys.exit(main())
