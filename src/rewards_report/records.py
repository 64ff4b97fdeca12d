"""
Record types returned by the rewards API.

The API speaks snake_case JSON; each dataclass mirrors one resource and
is built with from_dict(). Extra keys are ignored so new server fields do
not break parsing.
"""

from dataclasses import dataclass
from typing import Optional


def _require(data: dict, key: str):
    """Return data[key], raising ValueError if it is missing or null."""
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object record, got {type(data).__name__}: {data!r}")
    value = data.get(key)
    if value is None:
        raise ValueError(f"Record is missing required field '{key}': {data!r}")
    return value


@dataclass(frozen=True)
class Nomination:
    nomination_id: int
    nominee_id: int
    nominator_id: int
    reward_id: int
    nomination_date: Optional[str] = None
    approval_status: Optional[str] = None
    nomination_type: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Nomination":
        return cls(
            nomination_id=_require(data, "nomination_id"),
            nominee_id=data.get("nominee_id"),
            nominator_id=data.get("nominator_id"),
            reward_id=data.get("reward_id"),
            nomination_date=data.get("nomination_date"),
            approval_status=data.get("approval_status"),
            nomination_type=data.get("nomination_type"),
        )


@dataclass(frozen=True)
class Reward:
    reward_id: int
    reward_name: str
    category_id: Optional[int] = None
    description: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Reward":
        return cls(
            reward_id=_require(data, "reward_id"),
            reward_name=data.get("reward_name") or "",
            category_id=data.get("category_id"),
            description=data.get("description"),
            image_url=data.get("image_url"),
        )


@dataclass(frozen=True)
class RewardCategory:
    category_id: int
    category_name: str

    @classmethod
    def from_dict(cls, data: dict) -> "RewardCategory":
        return cls(
            category_id=_require(data, "category_id"),
            category_name=data.get("category_name") or "",
        )


@dataclass(frozen=True)
class Employee:
    employee_id: int
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    department_id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            employee_id=_require(data, "employee_id"),
            first_name=data.get("first_name") or "",
            last_name=data.get("last_name") or "",
            email=data.get("email"),
            department_id=data.get("department_id"),
        )


@dataclass(frozen=True)
class Region:
    region_id: int
    region_name: str
    availability_zones: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "Region":
        return cls(
            region_id=_require(data, "region_id"),
            region_name=data.get("region_name") or "",
            availability_zones=data.get("availability_zones"),
        )
