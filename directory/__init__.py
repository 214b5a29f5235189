"""Employee directory: JSON-backed employee records behind a small FastAPI app."""
