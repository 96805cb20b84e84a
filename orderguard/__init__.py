# ==== ORDERGUARD PACKAGE ==== #

"""
Order and user business rules.

Resolves order statuses to display messages and validates orders and users
through ordered guard-clause rule chains that return verdicts instead of
raising.
"""

__version__ = "0.1.0"
