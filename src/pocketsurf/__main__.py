"""Allow ``python -m pocketsurf``."""

from pocketsurf.main import main

if __name__ == "__main__":
    main()
