"""A small interactive command shell with string, memory and list utilities."""

__version__ = "0.1.0"