"""
Application layer for the plan API.

This package contains:
- ports/: Protocol interfaces for the catalog and plan storage
- exceptions: Errors raised across the application and infrastructure layers
"""
