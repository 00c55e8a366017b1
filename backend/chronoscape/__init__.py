"""
Chronoscape - historical background resolution

Picks a background image for a historical document from its date and
place of publication, falling back from the most specific image in the
asset library to the most general one.
"""

__version__ = "0.1.0"
