"""Small text helpers shared by templates."""

from datetime import datetime


def truncate(text, length=50):
    """Trim long text for table cells"""
    if not text:
        return ""
    return f"{text[:length]}..." if len(text) > length else text


def date_string(value):
    """Render a timestamp like ``Sun Oct 18 2026``"""
    if not value:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace('Z', '+00:00'))
    return value.strftime('%a %b %d %Y')


def percent_text(value):
    """Render a percentage without trailing zeros: 25.0 -> ``25``, 12.50 -> ``12.5``"""
    if value is None:
        return "0"
    return f"{value:.2f}".rstrip('0').rstrip('.')
