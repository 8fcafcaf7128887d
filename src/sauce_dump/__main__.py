"""Allow ``python -m sauce_dump``."""

from sauce_dump.cli.main import main

main()
