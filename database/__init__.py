"""Persistence: ORM models, session factory and the user store."""
