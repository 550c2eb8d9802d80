"""
Shopfront Shared Kernel
=======================

Logic shared by the Flet desktop app and the Streamlit sandbox.

Architecture:
- core: EventBus, configuration, cleanup hooks
- domain: Product, Catalog, Cart
- infrastructure: catalog sources and JSON persistence
"""

__version__ = "1.0.0"
