"""Adapters connecting the application layer to the filesystem and stdin."""
