"""Travel Tracker: days-outside-the-country tracking for naturalization."""

__version__ = "1.0.0"
