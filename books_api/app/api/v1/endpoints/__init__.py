"""
Endpoint subpackage for API v1.

Each module in this package defines the handlers for one domain.  The
handlers are bound to HTTP methods and paths in ``router.py``.
"""
