"""
User Model
==========

Domain model representing a login account.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    """Login account. `password` always holds a hash, never plain text."""
    username: str
    password: str = field(repr=False)
    id: Optional[int] = None
