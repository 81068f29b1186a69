"""Allow running as ``python -m todomd``."""

from todomd.main import main

if __name__ == "__main__":
    main()
