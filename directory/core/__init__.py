"""
Core utilities shared across the directory API.

This package hosts configuration (env vars, data file path) and logging setup.
Routers/services depend on these primitives instead of reading os.environ.
"""
