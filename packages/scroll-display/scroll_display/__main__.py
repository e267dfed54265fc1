import sys

from scroll_display.cli import main

sys.exit(main())
