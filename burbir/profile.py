"""User profile: bio, phone number, weton, visibility and photo."""

from __future__ import annotations

from dataclasses import dataclass, field

from burbir.photo import ProfilePhoto

BIO_MAX = 135
WETON_NAMES = frozenset({"pahing", "kliwon", "wage", "pon", "legi"})


def is_weton_valid(weton: str) -> bool:
    """True for one of the five weton names in any letter case, or an empty weton."""
    return weton == "" or weton.lower() in WETON_NAMES


def is_phone_valid(phone: str) -> bool:
    """True if the phone number holds only the digits 0 to 9."""
    return all("0" <= char <= "9" for char in phone)


@dataclass
class Profile:
    """Profile details of one account."""

    bio: str = ""
    phone: str = ""
    weton: str = ""
    public: bool = True
    photo: ProfilePhoto = field(default_factory=ProfilePhoto)

    def is_private(self) -> bool:
        """True if the account is private."""
        return not self.public

    def is_public(self) -> bool:
        """True if the account is public."""
        return self.public

    def change_bio(self, text: str) -> bool:
        """Set the bio, cut to BIO_MAX characters; returns True if it was cut."""
        self.bio = text[:BIO_MAX]
        return len(text) > BIO_MAX

    def change_phone(self, phone: str) -> None:
        """Set the phone number."""
        self.phone = phone

    def change_weton(self, weton: str) -> None:
        """Set the weton."""
        self.weton = weton

    def toggle_visibility(self) -> None:
        """Switch between public and private."""
        self.public = not self.public

    def render(self, username: str) -> str:
        """The profile of ``username`` without the photo."""
        return (
            f"\n| Nama: {username}"
            f"\n| Bio Akun: {self.bio}"
            f"\n| No HP: {self.phone}"
            f"\n| Weton: {self.weton}"
        )

    def render_full(self, username: str) -> str:
        """The profile of ``username`` followed by the photo."""
        return (
            self.render(username)
            + f"\n\nFoto profil akun {username}\n"
            + self.photo.render()
        )