import sys

from hsjwt.cli import main

sys.exit(main())
