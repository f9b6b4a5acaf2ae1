import sys

from seqturns.cli import main

sys.exit(main())
