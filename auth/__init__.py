"""
ShopCatalog - Auth Module
=========================
Sesja administratora (Supabase Auth lub dostawca lokalny w trybie mock).
"""

from auth.service import AuthService
from auth.local import (
    LocalAuthProvider,
    LocalUser,
    LocalSession,
    LocalAuthResponse,
)

__all__ = [
    'AuthService',
    'LocalAuthProvider',
    'LocalUser',
    'LocalSession',
    'LocalAuthResponse',
]
