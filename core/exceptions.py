"""
ShopCatalog - Własne wyjątki
============================
Hierarchia wyjątków dla całego systemu.
"""


class CatalogError(Exception):
    """Bazowy wyjątek dla wszystkich błędów ShopCatalog"""

    def __init__(self, message: str, code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def __str__(self):
        if self.details:
            return f"[{self.code}] {self.message} | Details: {self.details}"
        return f"[{self.code}] {self.message}"


# ============================================================
# Database Errors
# ============================================================

class DatabaseError(CatalogError):
    """Błędy związane z bazą danych"""
    pass


# ============================================================
# Storage Errors
# ============================================================

class StorageError(CatalogError):
    """Błędy związane z Supabase Storage"""
    pass


class FileUploadError(StorageError):
    """Błąd podczas uploadu pliku"""

    def __init__(self, path: str, reason: str = None):
        super().__init__(
            f"Failed to upload file: {path}" + (f" - {reason}" if reason else ""),
            code="FILE_UPLOAD_ERROR",
            details={"path": path, "reason": reason}
        )


class FileTooLargeError(StorageError):
    """Plik jest za duży"""

    def __init__(self, filename: str, size_mb: float, max_size_mb: float):
        super().__init__(
            f"File '{filename}' is too large ({size_mb:.1f} MB). Maximum: {max_size_mb:.1f} MB",
            code="FILE_TOO_LARGE",
            details={
                "filename": filename,
                "size_mb": size_mb,
                "max_size_mb": max_size_mb
            }
        )


class InvalidFileTypeError(StorageError):
    """Nieprawidłowy typ pliku"""

    def __init__(self, filename: str, content_type: str, allowed_types):
        super().__init__(
            f"Invalid file type: '{filename}' ({content_type}). "
            f"Allowed: {', '.join(allowed_types)}",
            code="INVALID_FILE_TYPE",
            details={
                "filename": filename,
                "content_type": content_type,
                "allowed_types": list(allowed_types)
            }
        )


# ============================================================
# Validation Errors
# ============================================================

class ValidationError(CatalogError):
    """Błędy walidacji danych"""
    pass


class RequiredFieldError(ValidationError):
    """Brak wymaganego pola"""

    def __init__(self, field: str, entity_type: str = None):
        msg = f"Field '{field}' is required"
        if entity_type:
            msg = f"{entity_type}: {msg}"
        super().__init__(msg, code="REQUIRED_FIELD", details={"field": field})


class InvalidFieldValueError(ValidationError):
    """Nieprawidłowa wartość pola"""

    def __init__(self, field: str, value, reason: str = None):
        msg = f"Invalid value for field '{field}': {value}"
        if reason:
            msg += f" - {reason}"
        super().__init__(
            msg,
            code="INVALID_FIELD_VALUE",
            details={"field": field, "value": str(value), "reason": reason}
        )


# ============================================================
# Authentication Errors
# ============================================================

class AuthError(CatalogError):
    """Błędy autentykacji"""
    pass


class InvalidCredentialsError(AuthError):
    """Błędny email lub hasło"""

    def __init__(self, email: str = None):
        super().__init__(
            "Invalid login credentials",
            code="INVALID_CREDENTIALS",
            details={"email": email} if email else None
        )


# ============================================================
# Integration Errors
# ============================================================

class IntegrationError(CatalogError):
    """Błędy integracji z zewnętrznymi systemami"""
    pass


class SupabaseConnectionError(IntegrationError):
    """Błąd połączenia z Supabase"""

    def __init__(self, reason: str = None):
        super().__init__(
            "Failed to connect to Supabase" + (f": {reason}" if reason else ""),
            code="SUPABASE_CONNECTION_ERROR"
        )
