"""
auth — User authentication module.

Provides:
  • JWT token creation & verification (python-jose, HS256)
  • Password hashing (bcrypt)
  • ``AuthService`` — register / login / profile lookup
  • Register / Login / getUser API routes
  • ``get_current_user_id`` FastAPI dependency
"""
