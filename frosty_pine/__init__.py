"""
Frosty Pine - purchase tracking core.

Brands, categories, products, stores, priced items and the transactions
that bundle them, plus the use cases that operate on them.
"""

__version__ = "0.1.0"
