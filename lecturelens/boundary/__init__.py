"""
Boundary layer for external system integrations.

Handles all interactions with external systems (session storage, embedding provider).
Provides adapters and clients for infrastructure dependencies.
"""
