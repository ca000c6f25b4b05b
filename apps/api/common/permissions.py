# PATH: apps/api/common/permissions.py
from __future__ import annotations

from rest_framework.permissions import BasePermission


def is_admin_user(u) -> bool:
    return bool(getattr(u, "is_superuser", False) or getattr(u, "is_staff", False))


def is_student_user(u) -> bool:
    # staff/admin 아니면 student로 취급
    return not is_admin_user(u)


class IsStudent(BasePermission):
    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        return bool(u and u.is_authenticated and is_student_user(u))


class IsStaffOrAdmin(BasePermission):
    """시험/패키지 정의, 그룹 자격 재계산 등 운영 API."""

    def has_permission(self, request, view):
        u = getattr(request, "user", None)
        return bool(u and u.is_authenticated and is_admin_user(u))
