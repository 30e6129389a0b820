"""Privacy-safe visitor metadata derived from request headers."""

import json
from collections.abc import Mapping

from pydantic import BaseModel

UNKNOWN_COUNTRY = "unknown"

_MOBILE_TOKENS = ("mobile", "android", "iphone")
_TABLET_TOKENS = ("tablet", "ipad")


class VisitorInfo(BaseModel):
    """Coarse visitor attributes; nothing that identifies a person."""

    device_type: str
    browser: str
    country: str


def detect_device_type(user_agent: str) -> str:
    """
    Classify a user agent as mobile, tablet or desktop.

    Mobile tokens are checked first, so an Android tablet that advertises
    "mobile" counts as mobile.
    """
    ua = user_agent.lower()
    if any(token in ua for token in _MOBILE_TOKENS):
        return "mobile"
    if any(token in ua for token in _TABLET_TOKENS):
        return "tablet"
    return "desktop"


def detect_browser(user_agent: str) -> str:
    """
    Return the browser family for a user agent.

    Order matters: Chrome UAs also contain "safari", and legacy Edge UAs
    contain "chrome".
    """
    ua = user_agent.lower()
    if "firefox" in ua:
        return "Firefox"
    if "chrome" in ua and "edge" not in ua:
        return "Chrome"
    if "safari" in ua and "chrome" not in ua:
        return "Safari"
    if "edge" in ua:
        return "Edge"
    if "opera" in ua or "opr" in ua:
        return "Opera"
    return "Other"


def resolve_country(headers: Mapping[str, str]) -> str:
    """
    Resolve the visitor's country from platform geolocation headers.

    ``x-country`` is read first and overridden by the country code in the
    ``x-nf-geo`` JSON header. ``cloudfront-viewer-country`` is the fallback
    when the function runs behind CloudFront instead.

    Args:
        headers: Request headers (case-insensitive mapping)

    Returns:
        Country code, or "unknown"
    """
    country = headers.get("x-country")

    geo_header = headers.get("x-nf-geo")
    if geo_header:
        try:
            geo = json.loads(geo_header)
        except ValueError:
            geo = None
        country_info = geo.get("country") if isinstance(geo, dict) else None
        code = country_info.get("code") if isinstance(country_info, dict) else None
        if code:
            country = code

    if not country:
        country = headers.get("cloudfront-viewer-country")

    return country or UNKNOWN_COUNTRY


def extract_visitor(headers: Mapping[str, str], user_agent: str | None = None) -> VisitorInfo:
    """
    Build visitor metadata for an analytics event.

    Args:
        headers: Request headers
        user_agent: User agent reported by the page; falls back to the
            User-Agent header

    Returns:
        VisitorInfo with device type, browser and country
    """
    ua = user_agent or headers.get("user-agent") or ""
    return VisitorInfo(
        device_type=detect_device_type(ua),
        browser=detect_browser(ua),
        country=resolve_country(headers),
    )
