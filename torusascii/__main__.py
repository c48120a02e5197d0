import sys

from torusascii.cli import main

sys.exit(main())
