# apps/domains/discounts/models/__init__.py
from .study_group import StudyGroup
from .organization import Organization, OrganizationMember
from .discount_rule import DiscountRule

__all__ = [
    "StudyGroup",
    "Organization",
    "OrganizationMember",
    "DiscountRule",
]
