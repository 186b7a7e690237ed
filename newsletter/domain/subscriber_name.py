from __future__ import annotations

from dataclasses import dataclass

import regex

from newsletter.errors import InvalidNameError

MAX_GRAPHEMES = 256
FORBIDDEN_CHARACTERS = frozenset('/()"<>\\{}')

# One match per user-perceived character
_GRAPHEME = regex.compile(r"\X")


def grapheme_count(text: str) -> int:
    return len(_GRAPHEME.findall(text))


@dataclass(frozen=True, slots=True)
class SubscriberName:
    """A validated subscriber display name.

    The stored value is the raw input, untrimmed, exactly as submitted.
    Construction validates; an instance with an invalid value cannot exist.
    """

    value: str

    def __post_init__(self) -> None:
        """Reject the value when it is empty or whitespace only, longer than
        256 graphemes, or contains any of ``/()"<>\\{}``.

        Raises:
            InvalidNameError: For any of the reasons above.
        """
        raw = self.value
        is_empty_or_whitespace = not raw.strip()
        is_too_long = grapheme_count(raw) > MAX_GRAPHEMES
        contains_forbidden_characters = any(c in FORBIDDEN_CHARACTERS for c in raw)

        if is_empty_or_whitespace or is_too_long or contains_forbidden_characters:
            raise InvalidNameError(raw)

    @classmethod
    def parse(cls, raw: str) -> SubscriberName:
        return cls(raw)

    def __str__(self) -> str:
        return self.value
