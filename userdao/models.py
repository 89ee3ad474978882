"""Domain models for the user data-access layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:
    """Represents a row of the ``users`` table.

    The password is stored exactly as given; no hashing is applied.
    """

    id: str = ""
    name: str = ""
    password: str = ""


__all__ = ["User"]
