"""Root of the neo-acl error hierarchy.

Every neo-acl error carries a human readable message, a stable error code
(the class name unless given) and a dict of structured details, so an
embedding service can log it or turn it into a response body without
inspecting the exception type.
"""

from typing import Any, Dict, Optional


class NeoAclError(Exception):
    """Base exception for all neo-acl errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoAclError) -> Dict[str, Any]:
    """Render a neo-acl error as the payload an authorization service returns.

    Args:
        exception: Error raised by a tree, role or service call

    Returns:
        ``{"error": {"code", "message", "details", "type"}}``
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
