"""
models/user.py
--------------
Domain model for a registered user.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single user record.

    Attributes:
        name: Display name.
        email: Contact address, unique across all users.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    id: Optional[int] = None
