"""
Catalog Service - e-commerce catalog API
"""

__version__ = "1.0.0"
