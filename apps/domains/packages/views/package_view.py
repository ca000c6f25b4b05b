"""
패키지 API

POST /packages/          (운영자)
GET  /packages/{id}/
PUT  /packages/{id}/     (운영자, 부분 수정 허용)

저장 경로는 항상 save_package → PackagePricingPolicy.normalize()
"""
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.packages.save_package import save_package
from apps.api.common.permissions import IsStaffOrAdmin
from apps.domains.packages.models import Package
from apps.domains.packages.serializers.package import PackageSerializer, PackageWriteSerializer


def _serialized(package_id) -> dict:
    return PackageSerializer(Package.objects.get(id=int(package_id))).data


class PackageCreateView(APIView):
    permission_classes = [IsAuthenticated, IsStaffOrAdmin]

    def post(self, request):
        serializer = PackageWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved = save_package(DjangoUnitOfWork(), serializer.validated_data)
        return Response(_serialized(saved.id), status=status.HTTP_201_CREATED)


class PackageDetailView(APIView):

    def get_permissions(self):
        if self.request.method == "GET":
            return [IsAuthenticated()]
        return [IsAuthenticated(), IsStaffOrAdmin()]

    def get(self, request, package_id: int):
        return Response(PackageSerializer(get_object_or_404(Package, id=package_id)).data)

    def put(self, request, package_id: int):
        serializer = PackageWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        saved = save_package(DjangoUnitOfWork(), serializer.validated_data, package_id=str(package_id))
        return Response(_serialized(saved.id))
