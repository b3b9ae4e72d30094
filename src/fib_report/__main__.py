import sys

from fib_report.cli import main

sys.exit(main())
