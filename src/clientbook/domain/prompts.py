"""Selection criteria for gathering emails of a group of clients."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from clientbook.domain.entities import Person


class GatherEmailPrompt(Protocol):
    """Decides which persons take part in an email gathering."""

    def matches(self, person: "Person") -> bool:
        ...


@dataclass(frozen=True)
class GatherEmailByFinancialPlan:
    """Selects persons holding a financial plan whose name contains the keyword."""

    keyword: str

    def matches(self, person: "Person") -> bool:
        needle = self.keyword.strip().lower()
        return any(needle in plan.value.lower() for plan in person.financial_plans)

    def __str__(self) -> str:
        return f"financial plan '{self.keyword}'"


@dataclass(frozen=True)
class GatherEmailByTag:
    """Selects persons with a tag whose name contains the keyword."""

    keyword: str

    def matches(self, person: "Person") -> bool:
        needle = self.keyword.strip().lower()
        return any(needle in tag.value.lower() for tag in person.tags)

    def __str__(self) -> str:
        return f"tag '{self.keyword}'"
