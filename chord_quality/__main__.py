import sys

from chord_quality.cli import main

sys.exit(main())
