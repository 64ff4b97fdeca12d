"""Display-name lookups used by the management screens."""

from typing import Iterable, Optional

from rewards_report import config
from rewards_report.records import Employee, Reward, RewardCategory

DEFAULT_STATUS = "pending"


def category_name(categories: Iterable[RewardCategory], category_id) -> str:
    """Name of a reward category, or "Unknown" if it does not exist."""
    for category in categories:
        if category.category_id == category_id:
            return category.category_name
    return config.UNKNOWN_CATEGORY


def employee_name(employees: Iterable[Employee], employee_id) -> str:
    """Full name of an employee, or "Employee {id}" if it does not exist."""
    for employee in employees:
        if employee.employee_id == employee_id:
            return employee.full_name
    return f"Employee {employee_id}"


def reward_name(rewards: Iterable[Reward], reward_id) -> str:
    """Name of a reward, or "Reward {id}" if it does not exist."""
    for reward in rewards:
        if reward.reward_id == reward_id:
            return reward.reward_name
    return f"Reward {reward_id}"


def status_label(status: Optional[str]) -> str:
    """Capitalized approval status; a missing status reads as Pending."""
    text = status or DEFAULT_STATUS
    return text[:1].upper() + text[1:]
