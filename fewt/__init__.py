"""A small file explorer: listings with file types, sorting, favourites, column browsing and a shell session."""

__version__ = "0.1.0"