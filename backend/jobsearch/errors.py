class JobSearchError(Exception):
    """Base class for errors raised by the job search domain and repositories."""


class InvalidArgument(JobSearchError, ValueError):
    """A required argument was missing or malformed."""


class AlreadyExists(JobSearchError):
    """An item with the same id is already stored."""

    def __init__(self, item_id):
        super().__init__(f"Item with id '{item_id}' already exists")
        self.item_id = item_id


class NotFound(JobSearchError, LookupError):
    """No item with the requested id is stored."""

    def __init__(self, item_id):
        super().__init__(f"Item with id '{item_id}' does not exist")
        self.item_id = item_id


class ConfigurationError(JobSearchError):
    """A repository was built with an unusable entity binding."""
