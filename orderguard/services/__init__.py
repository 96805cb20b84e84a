# ==== SERVICES PACKAGE ==== #

"""Validation, user rule, calculation and notification services."""

from .entity_validator import EntityValidator, validate_order, validate_user

__all__ = ["EntityValidator", "validate_order", "validate_user"]
