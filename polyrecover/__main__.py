import sys

from polyrecover.cli import main

sys.exit(main())
