import sys

from mcns.cli import main

sys.exit(main())
