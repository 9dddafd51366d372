"""Teacher and student profile records."""

from __future__ import annotations

import logging
from typing import Literal, Optional

from pydantic import BaseModel

from .db.models import ProfileModel
from .db.session import session_scope


logger = logging.getLogger(__name__)

ProfileRole = Literal["teacher", "student"]


class Profile(BaseModel):
    profile_id: str
    full_name: Optional[str] = None
    role: ProfileRole


class ProfileStore:
    def upsert(self, profile: Profile) -> Profile:
        with session_scope() as session:
            model = session.get(ProfileModel, profile.profile_id)
            if model is None:
                model = ProfileModel(id=profile.profile_id, role=profile.role)
                session.add(model)
            model.full_name = profile.full_name
            model.role = profile.role
            session.flush()
            logger.info("Upserted %s profile %s", profile.role, profile.profile_id)
            return self._model_to_domain(model)

    def get(self, profile_id: str) -> Profile | None:
        with session_scope(commit=False) as session:
            model = session.get(ProfileModel, profile_id)
            return self._model_to_domain(model) if model is not None else None

    def _model_to_domain(self, model: ProfileModel) -> Profile:
        return Profile(profile_id=model.id, full_name=model.full_name, role=model.role)  # type: ignore[arg-type]


profile_store = ProfileStore()

__all__ = ["Profile", "ProfileRole", "ProfileStore", "profile_store"]
