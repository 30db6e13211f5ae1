import sys

from pdf_split.cli import main

sys.exit(main())
