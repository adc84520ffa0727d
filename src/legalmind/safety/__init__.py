"""Safety mechanisms for the host process."""

from legalmind.safety.rate_limit import RateLimiter

__all__ = [
    "RateLimiter",
]
