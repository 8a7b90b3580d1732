"""Users module - user management and login."""

# Module metadata
__module_info__ = {
    "name": "users",
    "version": "1.0.0",
    "description": "User management and tenant-scoped login",
    "dependencies": [],
}
