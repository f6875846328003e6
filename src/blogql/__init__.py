"""
blogql
GraphQL API server for a blog: user accounts and blog posts
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
