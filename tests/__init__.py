# tests/__init__.py
"""
Expose common test utilities so tests can import directly:
    from tests import make_snapshot, make_listing
"""

from .utils import NOW, complete_fields, make_listing, make_row, make_snapshot

__all__ = ["NOW", "complete_fields", "make_listing", "make_row", "make_snapshot"]
