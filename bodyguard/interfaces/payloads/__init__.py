"""HTTP interface for the decoding bounded context."""
