"""HTTP layer: FastAPI application, routers, and response schemas."""
