"""
Domain exceptions shared by the persistence and service layers.
"""


class PersistenceError(Exception):
    """
    Raised when the backing data store fails to execute an operation.

    Covers connectivity problems, serialization failures and constraint
    violations such as a duplicate folder id. Never retried internally.
    """
    pass
