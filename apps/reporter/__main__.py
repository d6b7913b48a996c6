"""
Reporter Module Entry Point

Allows execution via: python -m apps.reporter
"""

from apps.reporter.runner import main

if __name__ == "__main__":
    main()
