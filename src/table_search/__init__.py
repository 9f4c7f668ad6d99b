"""
table-search: Catalog filtering by free-text query and category scope.

A small library and CLI that narrows a product catalog to the items
matching a typed search, optionally restricted to one category.
"""

__version__ = "0.1.0"
