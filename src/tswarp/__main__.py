import sys

from tswarp.cli import main

sys.exit(main())
