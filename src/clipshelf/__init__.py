"""clipshelf - clipboard history shared between an app and a keyboard."""

__version__ = "0.1.0"
