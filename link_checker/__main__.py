"""
Main entry point for the link_checker package.

Allows running the checker as: python -m link_checker
"""

from link_checker.cli import main

if __name__ == "__main__":
    main()
