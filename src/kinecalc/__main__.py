import sys

from kinecalc.cli import main

sys.exit(main())
