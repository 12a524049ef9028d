"""
ShopCatalog - Routing Module
"""

from routing.router import Router, Route, Navigation, ROUTES

__all__ = ['Router', 'Route', 'Navigation', 'ROUTES']
