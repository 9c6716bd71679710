"""ProdigyHub - TMF qualification, user and address sync backend."""

__version__ = "1.0.0"
