"""Application services orchestrating domain rules and persistence."""

from nova_users.application.services.role_workflow import RoleWorkflow

__all__ = ["RoleWorkflow"]
