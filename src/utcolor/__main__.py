"""Allow running as ``python -m utcolor``."""

from utcolor.cli.main import main

main()
