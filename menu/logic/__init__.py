"""Core business logic layer.

Subpackages:
- catalog: filtering the ingredient catalog
- pricing: total price and nutrition for a menu item
"""
__all__ = ["catalog", "pricing"]
