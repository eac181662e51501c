"""
BookNotes Backend - Personal Notes and Book Favorites API

A small authenticated backend where every note and favorite belongs to the
account that created it.
"""

__version__ = "1.0.0"
