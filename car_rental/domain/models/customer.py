"""
Customer Model
==============

Domain model representing a renter. A customer may be linked to a login
account, but does not have to be.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class Customer:
    first_name: str
    last_name: str
    user_id: Optional[int] = None
    id: Optional[int] = None
