"""
Catalog module - Static product catalog and voice chat widget settings.
"""
from ai_playground.catalog.products import (
    ALL_CATEGORIES,
    PRODUCTS,
    get_product,
    get_voice_chat_config,
    list_categories,
    list_products,
)

__all__ = [
    "ALL_CATEGORIES",
    "PRODUCTS",
    "get_product",
    "get_voice_chat_config",
    "list_categories",
    "list_products",
]
