"""Allow ``python -m ghmcp``."""

from ghmcp.cli import main

main()
