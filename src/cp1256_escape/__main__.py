"""Allow ``python -m cp1256_escape``."""

from cp1256_escape.cli.main import main

main()
