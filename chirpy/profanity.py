"""
Chirp validation and profanity filtering
"""

from typing import AbstractSet

MAX_CHIRP_LENGTH = 140

BAD_WORDS = frozenset({"kerfuffle", "sharbert", "fornax"})
MASK = "****"


class ChirpTooLongError(ValueError):
    """Raised when a chirp body exceeds MAX_CHIRP_LENGTH characters"""

    def __init__(self, length: int):
        self.length = length
        super().__init__("Chirp is too long")


def validate_chirp_length(body: str) -> str:
    """Return body unchanged, or raise ChirpTooLongError if it is over the limit"""
    if len(body) > MAX_CHIRP_LENGTH:
        raise ChirpTooLongError(len(body))
    return body


def clean_body(body: str, bad_words: AbstractSet[str] = BAD_WORDS, mask: str = MASK) -> str:
    """
    Replace denylisted words with the mask.

    Only whole whitespace-separated tokens are compared, case-insensitively,
    so "Kerfuffle!" stays as it is. The result is joined with single spaces.
    """
    words = body.split()
    cleaned = [mask if word.lower() in bad_words else word for word in words]
    return " ".join(cleaned)
