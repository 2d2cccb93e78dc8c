"""
models/user.py
--------------
Domain model for application users (guests and property owners).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a registered user.

    Attributes:
        id: Database primary key (None for new records).
        name: Display name.
        email: Login email; stored verbatim.
        password: Stored verbatim; this layer performs no hashing.
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: dict) -> "User":
        return cls(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
