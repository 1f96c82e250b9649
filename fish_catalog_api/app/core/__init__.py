"""Core building blocks: configuration, logging, errors, store and security."""
