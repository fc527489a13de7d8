"""
Accounts bounded context — domain layer.

Sign-up input and the field rules it must satisfy.
"""
