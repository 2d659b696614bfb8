import sys

from sudoku_maker.cli.launcher import main

sys.exit(main())
