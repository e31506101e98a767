"""Infrastructure adapters: logging, filesystem and the remote compression API."""
