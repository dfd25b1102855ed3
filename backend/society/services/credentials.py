"""Single-record credential check for the society dashboard."""
import logging
from typing import Dict, Optional
from pydantic import ValidationError
from society.context import AppContext
from society.models.auth import Credentials, Profile
from society.models.preferences import Language
from society.storage.database import ProfileStore
from society.storage.local_state import LocalStateStore

logger = logging.getLogger(__name__)

CREDENTIALS_KEY = "society_creds"

_MESSAGES: Dict[str, Dict[Language, str]] = {
    "empty": {Language.ENGLISH: "Please fill all fields", Language.BENGALI: "সবগুলো ঘর পূরণ করুন"},
    "mismatch": {Language.ENGLISH: "Pins do not match", Language.BENGALI: "পিন দুটি মেলেনি"},
    "invalid": {Language.ENGLISH: "Invalid name or pin", Language.BENGALI: "ভুল নাম অথবা পিন"},
    "no_user": {Language.ENGLISH: "User not found", Language.BENGALI: "এই নামে কাউকে পাওয়া যায়নি"},
    "reset_ok": {Language.ENGLISH: "Pin updated successfully!", Language.BENGALI: "পিন সফলভাবে বদলেছে!"},
}


class CredentialError(Exception):
    """A credential action was rejected; ``message`` is localized."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class CredentialStore:
    """
    Exactly one credential record lives in the local state store.

    Registration overwrites it, reset changes only the password, and none of
    these actions touch transaction data.
    """

    def __init__(
        self,
        state: LocalStateStore,
        context: AppContext,
        profiles: Optional[ProfileStore] = None,
    ):
        self.state = state
        self.context = context
        self.profiles = profiles

    def _fail(self, code: str) -> CredentialError:
        return CredentialError(code, _MESSAGES[code][self.context.language])

    def load(self) -> Optional[Credentials]:
        raw = self.state.get(CREDENTIALS_KEY)
        if not raw:
            return None
        try:
            return Credentials.model_validate(raw)
        except ValidationError:
            logger.warning("Stored credential record is malformed")
            return None

    def has_credentials(self) -> bool:
        return self.load() is not None

    def register(self, username: str, password: str, email: str) -> str:
        """Replace the credential record and open a session for ``username``."""
        if not username or not password or not email:
            raise self._fail("empty")
        creds = Credentials(username=username, password=password, email=email)
        self.state.set(CREDENTIALS_KEY, creds.model_dump(by_alias=True))
        if self.profiles is not None:
            self.profiles.upsert_profile(Profile(username=username, email=email))
        self.context.start_session(username)
        logger.info("Society credentials registered", extra={"username": username})
        return username

    def login(self, username: str, password: str) -> str:
        """Case-insensitive username, exact password. Returns the stored spelling."""
        if not username or not password:
            raise self._fail("empty")
        saved = self.load()
        if saved and saved.username.lower() == username.lower() and saved.password == password:
            self.context.start_session(saved.username)
            return saved.username
        raise self._fail("invalid")

    def reset(self, username: str, password: str, confirm_password: str) -> str:
        """Change the password of the stored record; other fields are kept."""
        if not username or not password or not confirm_password:
            raise self._fail("empty")
        if password != confirm_password:
            raise self._fail("mismatch")
        saved = self.load()
        if not saved or saved.username.lower() != username.lower():
            raise self._fail("no_user")
        updated = saved.model_copy(update={"password": password})
        self.state.set(CREDENTIALS_KEY, updated.model_dump(by_alias=True))
        return _MESSAGES["reset_ok"][self.context.language]

    def logout(self) -> None:
        self.context.end_session()

    def verify_session(self) -> Optional[str]:
        """
        Re-check the session this process already holds against the profile store.

        Never opens a session; only a login or registration does that.
        Returns the verified username, or None after clearing the session.
        """
        username = self.context.session_user
        if not username:
            return None
        profile = self.profiles.find_profile(username) if self.profiles is not None else None
        if profile is None:
            logger.info("Session user has no profile; clearing session", extra={"username": username})
            self.context.end_session()
            return None
        return profile.username
