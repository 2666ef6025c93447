"""
TransLuxe - Live text translator
================================
This package provides a Flask-based service that keeps a translation of
free text continuously up to date while the user types:
1. Keystrokes are debounced into a single request per quiet period
2. Responses are fenced by sequence id so stale results never land

Version: 1.0.0
"""

__version__ = "1.0.0"

from transluxe.app import create_app, run_server

__all__ = ["create_app", "run_server", "__version__"]
