"""Domain value types for the showcase.

Enumerations and small helpers whose rules belong to the domain rather than
to any single entity.
"""

import re
from enum import Enum
from urllib.parse import quote

# Gallery selector value that disables category filtering
ALL_CATEGORIES = "all"

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


class FileType(str, Enum):
    """Declared presentation type of a work's attached file."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    DOCUMENT = "document"
    WEB = "web"

    @property
    def requires_upload(self) -> bool:
        """Web works point at an external URL instead of an uploaded file."""
        return self is not FileType.WEB

    @property
    def accept(self) -> str:
        """File picker accept pattern for uploads of this type."""
        return _ACCEPT_PATTERNS[self]


_ACCEPT_PATTERNS = {
    FileType.IMAGE: "image/*",
    FileType.VIDEO: "video/*",
    FileType.AUDIO: "audio/*",
    FileType.DOCUMENT: ".pdf,.doc,.docx,.txt",
    FileType.WEB: "*",
}


class WorkCategory(str, Enum):
    """Fixed set of categories a work can be filed under."""

    AI_ART = "ai-art"
    MACHINE_LEARNING = "machine-learning"
    COMPUTER_VISION = "computer-vision"
    NATURAL_LANGUAGE_PROCESSING = "natural-language-processing"
    ROBOTICS = "robotics"
    OTHER = "other"

    @property
    def label(self) -> str:
        """Human-readable category name."""
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    WorkCategory.AI_ART: "AI Art",
    WorkCategory.MACHINE_LEARNING: "Machine Learning",
    WorkCategory.COMPUTER_VISION: "Computer Vision",
    WorkCategory.NATURAL_LANGUAGE_PROCESSING: "Natural Language Processing",
    WorkCategory.ROBOTICS: "Robotics",
    WorkCategory.OTHER: "Other",
}


class VoteOutcome(str, Enum):
    """Result of casting a vote."""

    CAST = "cast"
    ALREADY_VOTED = "already_voted"


class MediaElement(str, Enum):
    """How a client should embed a work's media."""

    IMG = "img"
    VIDEO = "video"
    AUDIO = "audio"
    PDF_FRAME = "pdf-frame"
    LINK_CARD = "link-card"
    WEB_FRAME = "web-frame"


def normalize_email(email: str) -> str:
    """Trim and lowercase an email address.

    Raises:
        ValueError: If the value does not look like an email address
    """
    normalized = email.strip().lower()
    if not _EMAIL_PATTERN.match(normalized):
        raise ValueError(f"Invalid email address: {email!r}")
    return normalized


def email_local_part(email: str) -> str:
    """Return the part of an email address before the @."""
    return email.split("@", 1)[0]


def placeholder_avatar_url(seed: str, base_url: str) -> str:
    """Deterministic placeholder avatar for a username."""
    return f"{base_url}?seed={quote(seed)}"
