import sys

from statement_importer.cli import main

sys.exit(main())
