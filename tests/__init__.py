"""
Tests Package - Unit Tests

Test structure:
- tests/unit/ - Fast, isolated unit tests
- tests/conftest.py - Shared pytest fixtures (record builders, enrichers)
"""
