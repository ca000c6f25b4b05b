# PATH: apps/api/common/models.py
from django.db import models


class TimestampModel(models.Model):
    """
    생성 / 수정 시간 자동 기록 추상 모델
    """
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True


class BaseModel(TimestampModel):
    """
    모든 모델이 상속하는 공통 베이스 모델 (타임스탬프 포함).
    """
    class Meta:
        abstract = True


class AppendOnlyError(Exception):
    """append-only 레코드 수정/삭제 시도."""


class AppendOnlyModel(BaseModel):
    """
    생성 후 불변 레코드 (Result 등).

    ✅ 최초 insert만 허용
    - 이미 저장된 인스턴스의 save() / delete() 는 AppendOnlyError
    - QuerySet.update() 는 막지 않는다 (운영 스크립트용 탈출구)
    """

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if self.pk is not None and not self._state.adding:
            raise AppendOnlyError(f"{type(self).__name__} is append-only")
        return super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise AppendOnlyError(f"{type(self).__name__} is append-only")
