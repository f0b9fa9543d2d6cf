"""
WritWay: Ontario Small Claims intake and document generation.

This package turns a free-text claim description into structured claim
data, walks the claimant through the remaining questions, and renders
Form 7A / Schedule "A" documents as PDF and Word files.
"""

__version__ = "0.1.0"
__author__ = "WritWay Team"

from writway.config import get_settings

__all__ = ["get_settings", "__version__"]
