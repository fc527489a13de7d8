"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer, and the code that touches raw
requests and the filesystem.
"""
