"""Backend package: settings and the FastAPI application factory."""
