# apps/domains/packages/urls.py
from django.urls import path

from .views.package_view import PackageCreateView, PackageDetailView

urlpatterns = [
    path("", PackageCreateView.as_view(), name="package-create"),
    path("<int:package_id>/", PackageDetailView.as_view(), name="package-detail"),
]
