"""HTTP interface: FastAPI application, routes and schemas."""
