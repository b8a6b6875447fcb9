"""Command-line interface."""
from campfire.main import main

if __name__ == "__main__":
    main()
