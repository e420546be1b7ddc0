"""
API routes module.

FastAPI app factory and routers for all HTTP endpoints.
"""
