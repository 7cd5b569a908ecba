"""Shared utilities: configuration, logging, schemas, timezones."""
