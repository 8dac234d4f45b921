import sys

from wakeup.cli import main

sys.exit(main())
