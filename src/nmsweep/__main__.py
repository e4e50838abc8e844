"""Allow running as ``python -m nmsweep``."""

from nmsweep.cli import main

if __name__ == "__main__":
    main()
