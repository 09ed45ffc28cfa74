"""Infrastructure adapters: database engine and logging."""
