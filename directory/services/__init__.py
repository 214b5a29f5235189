"""
Use-case helpers for the directory API.

Routers call these helpers to turn raw request bodies into trusted values
before handing them to the store.
"""
