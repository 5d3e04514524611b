"""
Common utility functions used across multiple routes.
"""

from datetime import datetime


def iso_format(dt: datetime) -> str:
    """Format datetime as ISO string with Z suffix."""
    return dt.isoformat() + "Z"


def display_name(username: str, preferred: str | None = None) -> str:
    """Name to show for a user: the chosen display name, else the username."""
    if isinstance(preferred, str) and preferred.strip():
        return preferred.strip()
    return username


def avatar_url_for(name: str) -> str:
    """Generated initials avatar used when a user has not set one."""
    return "https://ui-avatars.com/api/?name=" + "+".join(name.split()) + "&background=a78bfa&color=fff"
