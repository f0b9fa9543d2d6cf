"""
API route modules.
"""

from writway.api.routes import claim

__all__ = ["claim"]
