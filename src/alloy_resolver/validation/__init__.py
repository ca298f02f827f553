"""
Validation Package - Input Validation.

This package provides validation for:
    - RequestValidator: Validate calculation requests before processing

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
    - Measurement outcomes are left to the resolver
"""

from alloy_resolver.validation.request_validator import (
    RequestValidator,
    ValidationError,
)

__all__ = [
    "RequestValidator",
    "ValidationError",
]
