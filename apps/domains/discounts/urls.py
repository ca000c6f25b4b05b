# apps/domains/discounts/urls.py
from django.urls import path

from .views.discount_view import (
    CheckDiscountView,
    DiscountRulesView,
    RefreshGroupEligibilityView,
    ValidateDiscountView,
)

urlpatterns = [
    path("check/", CheckDiscountView.as_view(), name="discount-check"),
    path("validate/", ValidateDiscountView.as_view(), name="discount-validate"),
    path("rules/", DiscountRulesView.as_view(), name="discount-rules"),
    path(
        "groups/<int:group_id>/refresh-eligibility/",
        RefreshGroupEligibilityView.as_view(),
        name="discount-group-refresh-eligibility",
    ),
]
