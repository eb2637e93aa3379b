import sys

from envroulette.cli import main

sys.exit(main())
