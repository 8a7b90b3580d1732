"""Categories module - owner-scoped todo categories."""

# Module metadata
__module_info__ = {
    "name": "categories",
    "version": "1.0.0",
    "description": "Owner-scoped categories with cascading todo cleanup",
    "dependencies": ["users", "todos"],
}
