"""
Application layer for the decoding bounded context.

Use cases turn decode outcomes into accepted payloads or rejections.
No framework or infrastructure imports allowed.
"""
