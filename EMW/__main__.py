import sys

from EMW.cli import main

sys.exit(main())
