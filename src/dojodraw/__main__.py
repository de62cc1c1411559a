import sys

from dojodraw.cli import main

sys.exit(main())
