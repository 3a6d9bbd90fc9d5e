"""Notification data models.

Notifications are the user-visible side channel of the query layer: toasts
in a browser, log lines or status messages elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Variant(Enum):
    """Visual weight of a notification."""

    DEFAULT = "default"
    DESTRUCTIVE = "destructive"


@dataclass(frozen=True, slots=True)
class Notification:
    """A single fire-and-forget user alert.

    Attributes:
        title: Short heading ("Error", "Success", "Session Expired").
        description: Human-readable message body.
        variant: Visual weight; destructive for failures.
    """

    title: str
    description: str
    variant: Variant = Variant.DEFAULT

    @classmethod
    def error(cls, description: str, title: str = "Error") -> Notification:
        """Create a destructive notification."""
        return cls(title=title, description=description, variant=Variant.DESTRUCTIVE)

    @classmethod
    def success(cls, description: str, title: str = "Success") -> Notification:
        """Create a default-variant success notification."""
        return cls(title=title, description=description)
