"""
Custom exceptions for the metrics engine.
"""


class MetricsError(Exception):
    """Base exception for the metrics engine."""
    pass


class LengthMismatchError(MetricsError):
    """Exception raised when paired inputs differ in length."""
    pass


class EmptyInputError(MetricsError):
    """Exception raised when a metric receives zero-length inputs."""
    pass


class InsufficientClustersError(MetricsError):
    """Exception raised when a clustering metric sees fewer than two clusters."""
    pass


class InvalidDimensionError(MetricsError):
    """Exception raised for ragged, empty or wrongly shaped point arrays."""
    pass
