"""Tenants module - workspace lookup and invite-gated provisioning."""

# Module metadata
__module_info__ = {
    "name": "tenants",
    "version": "1.0.0",
    "description": "Multi-tenancy support module",
    "dependencies": ["users"],
}
