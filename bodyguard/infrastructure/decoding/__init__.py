"""Request body decoding adapters."""
