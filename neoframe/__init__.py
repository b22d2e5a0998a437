"""Frame, cursor, window animation and key translation logic for a graphical editor front end."""

__version__ = "0.1.0"