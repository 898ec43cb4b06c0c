"""Internal modules for netrequest.

WARNING: These modules back `NetworkClient` and are not part of the public
API.

Modules:
    http - Shared HTTP transport configuration
    multipart - multipart/form-data body construction
    metrics - Response metrics sinks
    redaction - Header redaction for debug output
"""
