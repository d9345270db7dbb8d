"""journalsync: mirror a notes-vault journal into a site and publish it with git."""

__version__ = "0.1.0"
