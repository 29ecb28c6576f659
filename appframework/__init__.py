"""
App Framework

Lists registered apps and extensions, filtered by enabled state and by the
privileges of the requesting user.
"""

from .main import main

__version__ = "0.1.0"


if __name__ == "__main__":
    main()
