"""wikiguard - authorization and edit-lock core for a collaborative wiki."""

__version__ = "0.1.0"
