"""HTTP interface for the files bounded context."""
