"""Student Resource API."""
