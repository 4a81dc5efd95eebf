import sys

from src.tabulation.cli import main

sys.exit(main())
