"""
Development runner: simulates the tea scenario straight from a source
checkout, without installing the package.

Usage:
    $ python run.py
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from teacooling.main import main

if __name__ == "__main__":
    main()
