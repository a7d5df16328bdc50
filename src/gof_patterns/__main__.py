"""Allow ``python -m gof_patterns``."""

from gof_patterns.cli.main import main

if __name__ == "__main__":
    main()
