"""Text generation for itineraries."""

from tripbuilder.nlg.renderer import (
    format_people_summary,
    generate_activity_summary,
    generate_pricing_preview,
    render_itinerary_text,
)

__all__ = [
    "format_people_summary",
    "generate_activity_summary",
    "generate_pricing_preview",
    "render_itinerary_text",
]
