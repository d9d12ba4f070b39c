import sys

from sir.cli import main

sys.exit(main())
