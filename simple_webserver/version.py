"""Application name and version"""

NAME = "divman's GoServer"
__version__ = "1.0.0"

VERSION_STRING = f"{NAME} v{__version__}"
