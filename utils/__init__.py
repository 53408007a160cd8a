"""Shared schemas, validators and the error taxonomy."""
