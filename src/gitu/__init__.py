"""gitu - switch between git identities with one command."""

__version__ = "1.0.0"
