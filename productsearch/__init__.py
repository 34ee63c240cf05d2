"""Product Search API.

Paginated product listing, free-text search and wishlist endpoints
over a relational product catalog.
"""

__version__ = "0.1.0"
