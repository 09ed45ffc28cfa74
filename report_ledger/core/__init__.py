"""Core building blocks: settings, database, and pagination."""
