"""Entry point for ``python -m vocabdrill``."""

from vocabdrill.cli import main

if __name__ == "__main__":
    main()
