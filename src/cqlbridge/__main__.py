import sys

from cqlbridge.cli import main

sys.exit(main())
