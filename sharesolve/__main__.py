import sys

from sharesolve.cli import main

sys.exit(main())
