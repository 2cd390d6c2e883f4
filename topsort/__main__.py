import sys

from topsort.cli import main

sys.exit(main())
