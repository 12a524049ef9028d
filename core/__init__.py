#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ShopCatalog Core Module
=======================
Wspólne komponenty dla wszystkich modułów.
"""

# Supabase client
from core.supabase_client import (
    get_supabase_client,
    reset_client,
    test_connection,
)

# Exceptions
from core.exceptions import (
    CatalogError,
    DatabaseError,
    StorageError,
    FileUploadError,
    FileTooLargeError,
    InvalidFileTypeError,
    ValidationError,
    RequiredFieldError,
    InvalidFieldValueError,
    AuthError,
    InvalidCredentialsError,
    IntegrationError,
    SupabaseConnectionError,
)

# Events
from core.events import (
    EventType,
    Event,
    EventBus,
    EventHandler,
    create_event,
    setup_event_logging,
)

# Mock store
from core.memory_store import MemoryStore

# Base classes
from core.base_repository import BaseRepository, SupabaseRepository, MemoryRepository
from core.base_service import BaseService


__all__ = [
    # Supabase Client
    'get_supabase_client',
    'reset_client',
    'test_connection',

    # Exceptions
    'CatalogError',
    'DatabaseError',
    'StorageError',
    'FileUploadError',
    'FileTooLargeError',
    'InvalidFileTypeError',
    'ValidationError',
    'RequiredFieldError',
    'InvalidFieldValueError',
    'AuthError',
    'InvalidCredentialsError',
    'IntegrationError',
    'SupabaseConnectionError',

    # Events
    'EventType',
    'Event',
    'EventBus',
    'EventHandler',
    'create_event',
    'setup_event_logging',

    # Mock store
    'MemoryStore',

    # Base classes
    'BaseRepository',
    'SupabaseRepository',
    'MemoryRepository',
    'BaseService',
]
