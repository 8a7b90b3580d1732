"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Identifiers (string UUIDs)
ID_LENGTH = 36

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_TENANT_NAME_LENGTH = 100
MAX_SLUG_LENGTH = 100
MAX_CATEGORY_NAME_LENGTH = 100
MAX_ICON_LENGTH = 255
MAX_INVITE_KEY_LENGTH = 255
MAX_DUE_DATE_LENGTH = 64
MAX_ROLE_LENGTH = 16
MAX_PRIORITY_LENGTH = 10

# Validation patterns
SLUG_PATTERN = r"^[a-z0-9-]+$"
HEX_COLOR_PATTERN = r"^#[0-9A-Fa-f]{6}$"

# Password requirements
MIN_PASSWORD_LENGTH = 8
BCRYPT_ROUNDS = 10

# Token settings
ACCESS_TOKEN_EXPIRE_MINUTES = 60

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Invite keys seeded for new installations
DEFAULT_INVITE_KEYS = ("chronos-beta", "test-key-1", "test-key-2", "test-key-3")
