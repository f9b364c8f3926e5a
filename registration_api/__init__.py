"""Account and registration CRUD API over an in-memory, file-seeded store."""

__version__ = "0.1.0"
