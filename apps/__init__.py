"""Pipeline applications."""
