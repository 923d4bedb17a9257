class DatabaseQueryError(Exception):
    """
    Opaque failure of a read against the catalog store.

    Carries no driver detail on purpose: the cause is logged where it is
    caught and chained via ``__cause__``.
    """

    def __init__(self, message: str = "Database query failed") -> None:
        super().__init__(message)


class InvalidListRequest(ValueError):
    """Pagination or sorting input that cannot be turned into a query."""
