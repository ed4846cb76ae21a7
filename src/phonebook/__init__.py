"""
Phonebook
GraphQL API over an in-memory contact directory
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
