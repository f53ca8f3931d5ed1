"""Internal modules for Freshdesk SDK.

WARNING: This package contains modules used by the public resources.
These are not intended for direct use in application code.

Modules:
    endpoints - REST path table
    http - Shared HTTP client configuration and transport
"""
