"""
Catalog package: book model and the catalog service
(search, purchase, reviews, catalog maintenance).
"""

__version__ = "1.0.0"
