"""FastAPI web backend."""
