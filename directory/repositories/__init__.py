"""
Persistence adapters.

These modules encapsulate how employee records are stored/retrieved (today a
JSON file). Routers should go through the store rather than touching the file.
"""
