from __future__ import annotations

from typing import Dict, Iterable

from sqlalchemy import select
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from cinereview.database.models.user import UserProfile as DBUserProfile
from cinereview.database.repos._mapping import to_domain_user
from cinereview.domain.entities.user import UserProfile
from cinereview.domain.errors import UpstreamUnavailable


class SqlAlchemyUserDirectory:
    def __init__(self, session: Session) -> None:
        self.db = session

    def get_users(self, ids: Iterable[str]) -> Dict[str, UserProfile]:
        wanted = sorted({i for i in ids if i})
        if not wanted:
            return {}
        stmt = select(DBUserProfile).where(DBUserProfile.uid.in_(wanted))
        try:
            rows = self.db.execute(stmt).scalars().all()
        except OperationalError as e:
            raise UpstreamUnavailable("User directory unavailable") from e
        return {r.uid: to_domain_user(r) for r in rows}

    def upsert(self, profile: UserProfile) -> None:
        row = self.db.get(DBUserProfile, profile.uid)
        if row is None:
            row = DBUserProfile(uid=profile.uid)
            self.db.add(row)
        row.display_name = profile.display_name
        row.email = profile.email
        row.photo_url = profile.photo_url
