"""Test data factories."""

# Plain-text password given to every fixture user
TEST_PASSWORD = "password123"
