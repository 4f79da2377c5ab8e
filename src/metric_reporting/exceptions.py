"""
Exceptions raised by metric reporting configuration
"""

from typing import Optional


class FilterConfigurationError(ValueError):
    """Raised when reporter or filter configuration is invalid"""

    def __init__(self, message: str, pattern: Optional[str] = None):
        super().__init__(message)
        self.pattern = pattern
