"""Application context: display preferences and the session marker."""
import logging
from typing import Optional
from society.models.preferences import Language, Theme
from society.storage.local_state import LocalStateStore

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "society_lang"
THEME_KEY = "society_theme"


class AppContext:
    """
    Preferences and session state handed to services explicitly.

    Language and theme are read from the local state store by ``load()``
    and written back whenever they change. The session marker is held in
    memory only and does not survive a restart.
    """

    def __init__(self, state: LocalStateStore):
        self.state = state
        self.language = Language.ENGLISH
        self.theme = Theme.DARK
        self.session_user: Optional[str] = None

    def load(self) -> "AppContext":
        self.language = self._read_enum(LANGUAGE_KEY, Language, Language.ENGLISH)
        self.theme = self._read_enum(THEME_KEY, Theme, Theme.DARK)
        return self

    def _read_enum(self, key, enum_cls, default):
        raw = self.state.get(key)
        if raw is None:
            return default
        try:
            return enum_cls(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored preference", extra={"key": key, "value": raw})
            return default

    def set_language(self, language: Language) -> None:
        self.language = language
        self.state.set(LANGUAGE_KEY, language.value)

    def set_theme(self, theme: Theme) -> None:
        self.theme = theme
        self.state.set(THEME_KEY, theme.value)

    def toggle_language(self) -> Language:
        self.set_language(Language.ENGLISH if self.language == Language.BENGALI else Language.BENGALI)
        return self.language

    def toggle_theme(self) -> Theme:
        self.set_theme(Theme.DARK if self.theme == Theme.LIGHT else Theme.LIGHT)
        return self.theme

    @property
    def is_authenticated(self) -> bool:
        return self.session_user is not None

    def start_session(self, username: str) -> None:
        self.session_user = username

    def end_session(self) -> None:
        self.session_user = None
