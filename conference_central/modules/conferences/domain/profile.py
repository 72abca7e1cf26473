"""
Profile Domain Model

Pure data model for the per-caller profile entity and its key.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


class TeeShirtSize(str, Enum):
    """T-shirt size choices offered on the profile form."""
    NOT_SPECIFIED = "NOT_SPECIFIED"
    XS = "XS"
    S = "S"
    M = "M"
    L = "L"
    XL = "XL"
    XXL = "XXL"
    XXXL = "XXXL"


@dataclass(frozen=True)
class ProfileKey:
    """Datastore key of a profile; the caller identity is the key."""
    user_id: str


def extract_default_display_name(email: Optional[str]) -> Optional[str]:
    """
    Get the display name from the user's email.

    lemoncake@example.com becomes "lemoncake". An address without "@" is
    returned whole.
    """
    if email is None:
        return None
    return email.partition("@")[0]


@dataclass
class Profile:
    """Profile domain model."""
    user_id: str
    display_name: Optional[str]
    main_email: Optional[str]
    tee_shirt_size: TeeShirtSize = TeeShirtSize.NOT_SPECIFIED
    conference_keys_to_attend: List[str] = field(default_factory=list)

    @property
    def key(self) -> ProfileKey:
        return ProfileKey(self.user_id)

    def update(
        self,
        display_name: Optional[str] = None,
        tee_shirt_size: Optional[TeeShirtSize] = None
    ) -> None:
        """Update the user-modifiable fields; None leaves a field unchanged."""
        if display_name is not None:
            self.display_name = display_name
        if tee_shirt_size is not None:
            self.tee_shirt_size = tee_shirt_size

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """Create Profile from dictionary (e.g., from database row)."""
        return cls(
            user_id=data["user_id"],
            display_name=data.get("display_name"),
            main_email=data.get("main_email"),
            tee_shirt_size=TeeShirtSize(data.get("tee_shirt_size") or TeeShirtSize.NOT_SPECIFIED),
            conference_keys_to_attend=list(data.get("conference_keys_to_attend") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert Profile to dictionary."""
        return {
            "user_id": self.user_id,
            "display_name": self.display_name,
            "main_email": self.main_email,
            "tee_shirt_size": self.tee_shirt_size.value,
            "conference_keys_to_attend": list(self.conference_keys_to_attend),
        }


def default_profile(user_id: str, email: Optional[str]) -> Profile:
    """Build the profile a first-time caller gets; nothing is persisted."""
    return Profile(
        user_id=user_id,
        display_name=extract_default_display_name(email),
        main_email=email,
        tee_shirt_size=TeeShirtSize.NOT_SPECIFIED,
    )
