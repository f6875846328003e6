"""
Database module for blogql
"""

from .connection import Database, to_async_url
from .models import Base, BlogPosts, Users

__all__ = ["Base", "BlogPosts", "Database", "Users", "to_async_url"]
