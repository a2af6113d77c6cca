"""Allow ``python -m triadcalc``."""

from triadcalc.cli import main

main()
