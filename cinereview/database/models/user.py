from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cinereview.database.core.main import Base


class UserProfile(Base):
    """Display data for review authors, keyed by the identity provider's uid."""
    __tablename__ = "user_profile"

    uid: Mapped[str] = mapped_column(String(128), primary_key=True)
    display_name: Mapped[Optional[str]] = mapped_column(String(255))
    email: Mapped[Optional[str]] = mapped_column(String(320))
    photo_url: Mapped[Optional[str]] = mapped_column(Text)
