"""
Custom Exceptions untuk Sales Analytics Services
================================================

Definisi semua custom exceptions yang digunakan dalam business logic
"""

class SalesAnalyticsException(Exception):
    """Base exception untuk semua sales analytics errors"""
    def __init__(self, message, error_code=None, details=None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self):
        return {
            'error': True,
            'message': self.message,
            'error_code': self.error_code,
            'details': self.details
        }

class ValidationError(SalesAnalyticsException):
    """Error untuk validation failures"""
    def __init__(self, message, field=None, details=None, error_code='VALIDATION_ERROR'):
        super().__init__(message, error_code, details)
        self.field = field

class InvalidDateError(ValidationError):
    """Error ketika start_date / end_date tidak bisa di-parse sebagai tanggal"""
    def __init__(self, field, value, details=None):
        message = f"Invalid date for '{field}': {value!r}"
        details = {'field': field, 'value': value, **(details or {})}
        super().__init__(message, field=field, details=details, error_code='INVALID_DATE')
        self.value = value

class AuthenticationError(SalesAnalyticsException):
    """Error untuk authentication failures"""
    def __init__(self, message="Authentication failed", details=None):
        super().__init__(message, 'AUTHENTICATION_ERROR', details)

class AuthorizationError(SalesAnalyticsException):
    """Error untuk authorization failures"""
    def __init__(self, message="Access denied", required_role=None, details=None):
        super().__init__(message, 'AUTHORIZATION_ERROR', details)
        self.required_role = required_role
