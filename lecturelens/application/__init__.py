"""
Application layer.

Use case orchestration between the API, the core pipeline and the
session store.
"""
