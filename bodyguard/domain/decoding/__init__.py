"""
Decoding bounded context — domain layer.

Turns the outcome of a request body decode into either the decoded
value or a uniform (status code, message) error:
- Decode outcomes and failure reasons
- Cause chain traversal
- Error normalization
"""
