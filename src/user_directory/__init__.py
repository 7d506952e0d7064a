"""User directory service.

An in-memory directory of user records exposed as a small CRUD API, guarded by
bearer-token authentication and instrumented with request logging.
"""

__version__ = "0.1.0"
