"""Allow ``python -m qualinit``."""

from qualinit.cli import main

main()
