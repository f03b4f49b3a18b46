"""Allow ``python -m resource_generator``."""

from .command import main

if __name__ == "__main__":
    main()
