"""
Application layer for the files bounded context.
"""
