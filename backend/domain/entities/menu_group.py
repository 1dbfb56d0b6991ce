"""
MenuGroup Entity
"""

from dataclasses import dataclass
from typing import Optional

from exceptions import ValidationError


@dataclass(frozen=True)
class MenuGroup:
    """A logical menu category. Every menu belongs to exactly one."""

    id: Optional[int]
    name: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValidationError("Menu group name is required", {"name": self.name})
