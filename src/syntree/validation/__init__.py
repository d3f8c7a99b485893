"""
SynTree tree validation.

This package checks assembled or edited trees against a language grammar
and the global structural invariants.
"""

from syntree.validation.validator import is_valid, validate, validate_or_fail

__all__ = [
    "validate",
    "validate_or_fail",
    "is_valid",
]
