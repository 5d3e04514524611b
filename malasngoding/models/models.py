from malasngoding.config import Base
from sqlalchemy import Column, Integer, String, JSON, DateTime, ForeignKey, Text, Boolean, UniqueConstraint, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
from enum import Enum


class ProgressKind(str, Enum):
    """What a progress record tracks."""
    MODULE = "module"
    LESSON = "lesson"
    CHALLENGE = "challenge"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    display_name = Column(String, nullable=True)
    bio = Column(Text, nullable=True)
    avatar_url = Column(String, nullable=True)
    role = Column(String, default="student", nullable=False)  # student|admin
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    html_level = Column(Integer, default=1, nullable=False)
    css_level = Column(Integer, default=1, nullable=False)
    js_level = Column(Integer, default=1, nullable=False)
    total_points = Column(Integer, default=0, nullable=False)


class Language(Base):
    __tablename__ = "languages"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)  # html|css|javascript
    display_name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    icon_url = Column(String, nullable=True)
    color = Column(String, nullable=False)

    modules = relationship("Module", backref="language", cascade="all, delete-orphan")


class Module(Base):
    __tablename__ = "modules"
    id = Column(Integer, primary_key=True, index=True)
    language_id = Column(Integer, ForeignKey("languages.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    level = Column(String, nullable=False)  # easy|medium|hard
    level_number = Column(Integer, nullable=False)
    thumbnail_url = Column(String, nullable=True)
    sort_order = Column(Integer, nullable=False)
    points_to_earn = Column(Integer, default=10, nullable=False)

    lessons = relationship("Lesson", backref="module", cascade="all, delete-orphan")


class Lesson(Base):
    __tablename__ = "lessons"
    id = Column(Integer, primary_key=True, index=True)
    module_id = Column(Integer, ForeignKey("modules.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    content = Column(Text, nullable=False)  # HTML explanation
    code_example = Column(Text, nullable=True)
    preview_html = Column(Text, nullable=True)
    sort_order = Column(Integer, nullable=False)

    challenges = relationship("Challenge", backref="lesson", cascade="all, delete-orphan")


class Challenge(Base):
    __tablename__ = "challenges"
    id = Column(Integer, primary_key=True, index=True)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), index=True, nullable=False)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    instructions = Column(Text, nullable=False)
    initial_code = Column(Text, nullable=True)
    expected_output = Column(Text, nullable=True)
    hints = Column(JSON, nullable=False, default=list)  # list[str]
    sort_order = Column(Integer, nullable=False)
    points = Column(Integer, default=5, nullable=False)


class UserProgress(Base):
    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "kind", "target_id", name="uq_user_progress_target"),
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    kind = Column(SQLEnum(ProgressKind), nullable=False)
    target_id = Column(Integer, nullable=False)
    module_id = Column(Integer, ForeignKey("modules.id"), index=True, nullable=False)
    lesson_id = Column(Integer, ForeignKey("lessons.id"), nullable=True)
    challenge_id = Column(Integer, ForeignKey("challenges.id"), nullable=True)
    completed = Column(Boolean, default=False, nullable=False)
    code = Column(Text, nullable=True)
    points_earned = Column(Integer, default=0, nullable=False)
    last_accessed = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="progress", foreign_keys=[user_id])


class Badge(Base):
    __tablename__ = "badges"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(String, nullable=False)
    category = Column(String, index=True, nullable=False)  # html|css|javascript|general
    required_points = Column(Integer, nullable=False)
    level = Column(String, nullable=False)  # beginner|intermediate|advanced


class UserBadge(Base):
    __tablename__ = "user_badges"
    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="uq_user_badge"),
    )
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    badge_id = Column(Integer, ForeignKey("badges.id"), nullable=False)
    earned_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    user = relationship("User", backref="badges", foreign_keys=[user_id])
    badge = relationship("Badge", foreign_keys=[badge_id])
