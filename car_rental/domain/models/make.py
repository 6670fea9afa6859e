"""
Make Model
==========

Domain model representing a car manufacturer.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Make:
    """Car manufacturer. The slug is derived from the name and unique."""
    name: str
    slug: str
    id: Optional[int] = None
