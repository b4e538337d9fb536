"""Core primitives shared by the publishing workflow."""

from .rate_limiter import RateLimiter

__all__ = ["RateLimiter"]
