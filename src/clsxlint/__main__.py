import sys

from clsxlint.cli import main

sys.exit(main())
