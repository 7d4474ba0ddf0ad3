# dialer/exceptions.py
# -*- coding: utf-8 -*-
"""Exceptions raised by the dialer profile tooling."""

from typing import Optional


class DialerError(Exception):
    """Base class for dialer profile errors."""


class DialerValidationError(DialerError):
    """Raised when an install request violates a profile constraint."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        self.message = message
        super().__init__(message)
