"""
Hardpass Module Entry Point
============================

Allows running the hardpass CLI via: python -m hardpass
"""

from hardpass.cli import main

if __name__ == "__main__":
    main()
