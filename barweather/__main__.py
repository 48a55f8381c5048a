import sys

from barweather.cli import main

sys.exit(main())
