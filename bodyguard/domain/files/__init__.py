"""
Files bounded context — domain layer.

Stored documents offered for download (never inline preview).
"""
