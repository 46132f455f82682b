"""User Service: in-memory user CRUD over HTTP."""

__version__ = "1.0.0"
