"""Domain exceptions."""


class NovaUsersError(Exception):
    """Base exception for Nova Users."""

    pass


class DuplicateSlugError(NovaUsersError):
    """A Role with the same slug already exists in storage.

    Raised by the repository when the unique constraint rejects a write,
    which can happen when two submissions race past validation.
    """

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(f"A Role with slug '{slug}' already exists")
