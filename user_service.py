from __future__ import annotations
import logging
from typing import Optional

from db import KeyValueRepository
from models import ProfileType

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "homestrength.current_user_id"

# Raw values written by older releases.
LEGACY_PROFILE_VALUES = {"Daughter": ProfileType.DAUGHTER_MS}


class UserService:
    """Holds the currently selected profile."""

    def __init__(self, store: KeyValueRepository | None = None) -> None:
        self.store = store
        self.current_user: Optional[ProfileType] = None
        self._load_current_user()

    @staticmethod
    def available_profiles() -> list[ProfileType]:
        return list(ProfileType)

    @staticmethod
    def parse_profile(raw: str) -> Optional[ProfileType]:
        try:
            return ProfileType(raw)
        except ValueError:
            return LEGACY_PROFILE_VALUES.get(raw)

    def select_user(self, profile: ProfileType) -> None:
        self.current_user = profile
        if self.store is not None:
            self.store.save(CURRENT_USER_KEY, profile.value)
        logger.info("Selected profile %s", profile.display_name)

    def sign_out(self) -> None:
        self.current_user = None
        if self.store is not None:
            self.store.delete(CURRENT_USER_KEY)

    def _load_current_user(self) -> None:
        if self.store is None:
            return
        raw = self.store.load(CURRENT_USER_KEY)
        if not isinstance(raw, str):
            return
        self.current_user = self.parse_profile(raw)
