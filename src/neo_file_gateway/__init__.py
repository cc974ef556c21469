"""
neo-file-gateway: multi-tenant file gateway.

Stores, lists, searches, downloads and deletes files for principals
authenticated by an external identity service, each confined to its own
partition below one storage root.
"""

from .__version__ import __version__

__all__ = ["__version__"]
