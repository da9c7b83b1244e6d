"""Allow running as ``python -m tana_stdio``."""

from tana_stdio import main

if __name__ == "__main__":
    main()
