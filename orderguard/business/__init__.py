# ==== BUSINESS LOGIC PACKAGE ==== #

"""
Business logic package for domain rules and lookup tables.

This package contains the verdict reason codes returned by validation,
the order status message table and the errors raised when those tables
are misconfigured.
"""
