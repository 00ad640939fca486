"""signup-server: text routes and a user signup endpoint."""

__version__ = "0.1.0"
