"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (``TokenService``)
  • Password hashing (bcrypt)
  • Login API route
  • ``require_resource_owner`` FastAPI dependency
"""
