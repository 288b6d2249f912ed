"""Profile domain entity."""

from dataclasses import dataclass, field
from uuid import UUID, uuid4


@dataclass
class Profile:
    """Domain entity for a customer profile (owned by the identity provider)."""

    id: UUID = field(default_factory=uuid4)
    username: str = ""
    full_name: str = ""
    age: int | None = None
    phone: str = ""
    address: str = ""
