import sys

from sigtask.cli import run_cli

sys.exit(run_cli())
