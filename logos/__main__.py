import sys

from logos.cli import main

sys.exit(main())
