import sys

from latencyprobe.cli import main

sys.exit(main())
