"""FastAPI application and process-wide object wiring."""
