"""
API module initialization
"""

from . import auth, health, home, products, users

__all__ = ["auth", "health", "home", "products", "users"]
