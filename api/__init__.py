"""
API package for the Weekly Plan API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""
