"""
Main module entry point.

This allows running the status monitor as: python -m water_switch.main
"""

from .monitor import main

if __name__ == "__main__":
    main()
