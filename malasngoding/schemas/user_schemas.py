from typing import Optional

from malasngoding.schemas.base import CamelModel, IsoDatetime


class UserResponse(CamelModel):
    """Public view of a user. The password hash is never part of it."""
    id: int
    username: str
    email: str
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    role: str
    html_level: int
    css_level: int
    js_level: int
    total_points: int
    created_at: IsoDatetime


class UpdateProfileRequest(CamelModel):
    # Unknown keys (including "password") are ignored.
    username: Optional[str] = None
    email: Optional[str] = None
    display_name: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
