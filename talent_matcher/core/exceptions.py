"""
Exceptions raised by the matching engine.

Scoring itself never raises for dirty input; only configuration problems
surface to the caller.
"""


class ConfigurationError(ValueError):
    """Raised for invalid weights or malformed knowledge tables."""
