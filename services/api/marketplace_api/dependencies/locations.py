"""Location matcher dependency."""

from fastapi import Request

from locations import LocationMatcher


def get_location_matcher(request: Request) -> LocationMatcher:
    """Matcher built once at startup from the location registry."""
    return request.app.state.location_matcher
