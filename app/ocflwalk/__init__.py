"""ocflwalk - resolve and walk entities of OCFL storage roots."""

__version__ = "0.1.0"
