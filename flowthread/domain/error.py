"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class UnscopedPurgeError(ValidationError):
    """Raised when a cascade delete is requested without a page scope.

    Page id 0 means "every page" to the query engine, so purging it would
    erase the whole comment table.
    """

    def __init__(self, page_id: int):
        self.page_id = page_id
        super().__init__(f"Refusing to purge comments for page id {page_id}")
