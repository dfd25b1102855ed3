"""Display preferences."""
from enum import Enum


class Language(str, Enum):
    BENGALI = "bn"
    ENGLISH = "en"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"
