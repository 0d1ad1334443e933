import sys

from dfakit.cli import main

sys.exit(main())
