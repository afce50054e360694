"""Resolution key for the secret index."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UrlSecretType:
    """A repository URL paired with the Secret type expected for it.

    ``secret_type`` accepts a :class:`~credref.models.secrets.SecretType`
    member or any raw type string; it is stored as a plain ``str`` so keys
    built either way are equal and hash alike.
    """

    url: str
    secret_type: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "secret_type", str(self.secret_type))
