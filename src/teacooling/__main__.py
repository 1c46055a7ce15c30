"""Command-line interface."""
from teacooling.main import main

if __name__ == "__main__":
    main()
