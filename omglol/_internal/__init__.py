"""Internal modules for the omglol client.

WARNING: These modules back the public client classes.
They are not intended for direct use in application code.

Modules:
    dispatch - Request dispatcher and header redaction
    http - Shared HTTP client configuration
"""
