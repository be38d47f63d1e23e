"""
Card release sets.

Set bundles name sets "Set1", "Set2", ... while card codes and deck
codes carry the set number ("01" and 1 respectively). Event cards are
tagged "SetEvent" in bundles but their codes carry the number of the
set they were released in, so EVENTS has no code of its own.
"""

from enum import Enum


class CardSet(str, Enum):
    """A release set a card can belong to."""

    FOUNDATIONS = "Set1"
    RISING_TIDES = "Set2"
    CALL_OF_THE_MOUNTAIN = "Set3"
    EMPIRES_OF_THE_ASCENDED = "Set4"
    BEYOND_THE_BANDLEWOOD = "Set5"
    WORLDWALKER = "Set6"
    EVENTS = "SetEvent"
    UNSUPPORTED = "Unsupported"

    @classmethod
    def _missing_(cls, value: object) -> "CardSet":
        return cls.UNSUPPORTED

    @classmethod
    def from_code(cls, code: str) -> "CardSet":
        """
        Get the set with the given two-digit code, or UNSUPPORTED.

        Never returns EVENTS: event cards share the code of a regular set.
        """
        if not code.isdigit():
            return cls.UNSUPPORTED
        return cls.from_id(int(code))

    @classmethod
    def from_id(cls, set_id: int) -> "CardSet":
        """Get the set with the given deck code id, or UNSUPPORTED."""
        return cls(f"Set{set_id}")

    @property
    def id(self) -> int | None:
        """The numeric id used in deck codes, if the set has one."""
        if self in (CardSet.EVENTS, CardSet.UNSUPPORTED):
            return None
        return int(self.value.removeprefix("Set"))

    @property
    def code(self) -> str | None:
        """The two-digit code used in card codes, if the set has one."""
        set_id = self.id
        if set_id is None:
            return None
        return f"{set_id:02d}"

