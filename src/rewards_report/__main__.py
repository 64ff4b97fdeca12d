import sys

from rewards_report.cli import main

sys.exit(main())
