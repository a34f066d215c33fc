from enum import Enum
from typing import Any


class StrEnum(str, Enum):
    """
    String-valued enum whose auto() values are the lowercased member names.

    Values compare equal to plain strings, which keeps them friendly for
    YAML/JSON round-trips and command-line rendering.
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name.lower()

    def __str__(self) -> str:
        return str(self.value)
