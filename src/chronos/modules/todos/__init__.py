"""Todos module - owner-scoped tasks."""

# Module metadata
__module_info__ = {
    "name": "todos",
    "version": "1.0.0",
    "description": "Owner-scoped todos with admin-only deletion",
    "dependencies": ["users", "categories"],
}
