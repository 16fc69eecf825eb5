"""trip-builder: itinerary pricing, validation and text rendering."""

__version__ = "1.0.0"
