"""
Schemas package. Import from submodules or from this package.

Example:
    from malasngoding.schemas import UserResponse, Complaint
    from malasngoding.schemas.content_schemas import ModuleResponse
"""

from malasngoding.schemas.auth_schemas import (
    AuthTokenPayload,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    RegisterRequest,
)
from malasngoding.schemas.user_schemas import UserResponse, UpdateProfileRequest
from malasngoding.schemas.content_schemas import (
    LanguageResponse,
    ModuleResponse,
    LessonResponse,
    ChallengeResponse,
)
from malasngoding.schemas.user_progress_schemas import (
    RecordProgressRequest,
    UserProgressResponse,
    TargetProgressResponse,
)
from malasngoding.schemas.badge_schemas import (
    BadgeResponse,
    UserBadgeResponse,
    AwardBadgeRequest,
    BadgeStatusResponse,
)
from malasngoding.schemas.complaint_schemas import (
    Feeling,
    Theme,
    Timeframe,
    Complaint,
    FeelingCount,
    DailyMoodData,
    ComplaintStats,
    WeeklySummary,
    JournalState,
)

__all__ = [
    # auth
    "AuthTokenPayload",
    "LoginRequest",
    "LoginResponse",
    "LogoutResponse",
    "RegisterRequest",
    # user
    "UserResponse",
    "UpdateProfileRequest",
    # content
    "LanguageResponse",
    "ModuleResponse",
    "LessonResponse",
    "ChallengeResponse",
    # progress
    "RecordProgressRequest",
    "UserProgressResponse",
    "TargetProgressResponse",
    # badges
    "BadgeResponse",
    "UserBadgeResponse",
    "AwardBadgeRequest",
    "BadgeStatusResponse",
    # complaint journal
    "Feeling",
    "Theme",
    "Timeframe",
    "Complaint",
    "FeelingCount",
    "DailyMoodData",
    "ComplaintStats",
    "WeeklySummary",
    "JournalState",
]
