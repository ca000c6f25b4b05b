from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.ports.repositories import (
    DiscountRuleRepository,
    MembershipRepository,
    MockTestRepository,
    PackageRepository,
    ResultRepository,
)

__all__ = [
    "UnitOfWork",
    "MockTestRepository",
    "ResultRepository",
    "PackageRepository",
    "MembershipRepository",
    "DiscountRuleRepository",
]
