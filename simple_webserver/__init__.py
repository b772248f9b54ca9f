"""
Simple Webserver
Diagnostic HTTP front end with a Redis health probe
"""
from .version import NAME, VERSION_STRING, __version__
from .main import create_app

__all__ = ["NAME", "VERSION_STRING", "__version__", "create_app"]
