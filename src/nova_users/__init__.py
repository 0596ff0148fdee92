"""Nova Users - Roles administration for the Users module.

Lists, creates, shows, edits and deletes the Roles users are assigned to,
rendered inside the default Bootstrap admin layout.
"""

__version__ = "3.0.0"

from nova_users.infrastructure.web.app import app

__all__ = ["app", "__version__"]
