"""Profile endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from .profiles import Profile, ProfileRole, profile_store


router = APIRouter(prefix="/api/profiles", tags=["profiles"])


class ProfileUpsertRequest(BaseModel):
    full_name: Optional[str] = None
    role: ProfileRole


@router.put("/{profile_id}", response_model=Profile)
def upsert_profile(profile_id: str, payload: ProfileUpsertRequest) -> Profile:
    return profile_store.upsert(Profile(profile_id=profile_id, full_name=payload.full_name, role=payload.role))


@router.get("/{profile_id}", response_model=Profile)
def get_profile(profile_id: str) -> Profile:
    profile = profile_store.get(profile_id)
    if profile is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Profile '{profile_id}' was not found.",
        )
    return profile
