"""Credential model wrapping an account password."""

import hmac


class Credential:
    """Opaque password verifier.

    The secret is compared by exact match and is never exposed through
    attributes or repr.
    """

    __slots__ = ("_secret",)

    def __init__(self, secret: str):
        self._secret = secret.encode("utf-8")

    def verify(self, candidate: str) -> bool:
        """Return True if candidate matches the stored secret exactly."""
        return hmac.compare_digest(self._secret, candidate.encode("utf-8"))

    def __repr__(self) -> str:
        return "Credential(****)"
