"""Wrap objects so that calls to them pass through a consecutive-error circuit breaker."""

__version__ = "0.1.0"
__all__ = ["circuitbreaker"]