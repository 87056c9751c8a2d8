"""
Exceptions raised by the content services and mapped to API responses
"""


class ContentError(Exception):
    """Base exception for site content operations"""
    status_code: int = 500

    def __init__(self, message: str, status_code: int = None):
        self.message = message
        if status_code:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(ContentError):
    """Payload failed presence, length or URL checks"""
    status_code = 400

    def __init__(self, message: str, errors: dict = None):
        super().__init__(message, self.status_code)
        self.errors = errors or {}


class NotFoundError(ContentError):
    """Single-entity lookup matched no row"""
    status_code = 404


class DuplicateError(ContentError):
    """Unique constraint rejected the write"""
    status_code = 400


class UploadError(ContentError):
    """Image upload rejected or failed; nothing was stored"""
    status_code = 400


class InquiryError(ContentError):
    """Visitor message could not be relayed to the business inbox"""
    status_code = 502
