"""
MockTest Repository: Django ORM 구현 (메서드 내부에서만 apps.domains.exams import)
"""
from __future__ import annotations

from typing import Any, Optional

from academy.adapters.db.django.db_errors import translate_db_errors
from academy.domain.exams.entities import MockTest, Option, Question, QuestionType
from academy.domain.shared.errors import PersistenceConflict


def _question_to_entity(q) -> Question:
    return Question(
        id=str(q.id),
        text=q.text,
        type=QuestionType(q.question_type),
        options=tuple(Option(text=o.text, is_correct=bool(o.is_correct)) for o in q.options.all()),
        correct_answer=q.correct_answer or None,
        difficulty=q.difficulty or None,
        subject=q.subject or None,
        category=q.category or None,
        level=q.level or None,
        marks=q.marks,
    )


def _model_to_entity(m) -> Optional[MockTest]:
    if m is None:
        return None
    links = m.question_links.select_related("question").prefetch_related("question__options")
    return MockTest(
        id=str(m.id),
        title=m.title,
        questions=tuple(_question_to_entity(link.question) for link in links),
        marks_per_question=float(m.marks_per_question),
        total_marks=float(m.total_marks),
        passing_marks=float(m.passing_marks),
        negative_marking=float(m.negative_marking or 0),
        number_of_attempts=int(m.number_of_attempts or 1),
        number_of_questions=m.number_of_questions,
        duration_minutes=m.duration,
    )


def _pk(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class DjangoMockTestRepository:
    """MockTestRepository 구현."""

    @translate_db_errors("exams.get")
    def get(self, test_id: str) -> Optional[MockTest]:
        from apps.domains.exams.models import MockTest as MockTestModel
        pk = _pk(test_id)
        if pk is None:
            return None
        return _model_to_entity(MockTestModel.objects.filter(id=pk).first())

    @translate_db_errors("exams.get_definition")
    def get_definition(self, test_id: str) -> Optional[dict[str, Any]]:
        from apps.domains.exams.models import MockTest as MockTestModel
        pk = _pk(test_id)
        m = MockTestModel.objects.filter(id=pk).first() if pk is not None else None
        if m is None:
            return None
        return {
            "title": m.title,
            "description": m.description,
            "duration": m.duration,
            "number_of_questions": m.number_of_questions,
            "marks_per_question": m.marks_per_question,
            "total_marks": m.total_marks,
            "passing_marks": m.passing_marks,
            "negative_marking": m.negative_marking,
            "number_of_attempts": m.number_of_attempts,
            "status": m.status,
            "test_type": m.test_type,
            "question_ids": [str(qid) for qid in m.question_links.values_list("question_id", flat=True)],
        }

    @translate_db_errors("exams.existing_question_ids")
    def existing_question_ids(self, question_ids: list[str]) -> set[str]:
        from apps.domains.exams.models import Question as QuestionModel
        pks = [pk for pk in (_pk(q) for q in question_ids) if pk is not None]
        return {str(pk) for pk in QuestionModel.objects.filter(id__in=pks).values_list("id", flat=True)}

    @translate_db_errors("exams.save_definition")
    def save_definition(
        self, test_id: Optional[str], fields: dict[str, Any], question_ids: list[str]
    ) -> str:
        from django.db import IntegrityError, transaction
        from apps.domains.exams.models import MockTest as MockTestModel, MockTestQuestion

        try:
            with transaction.atomic():
                if test_id is None:
                    m = MockTestModel.objects.create(**fields)
                else:
                    m = MockTestModel.objects.get(id=_pk(test_id))
                    for key, value in fields.items():
                        setattr(m, key, value)
                    m.save()

                m.question_links.all().delete()
                MockTestQuestion.objects.bulk_create([
                    MockTestQuestion(mock_test=m, question_id=_pk(qid), order=i)
                    for i, qid in enumerate(question_ids, start=1)
                ])
        except IntegrityError as e:
            title = fields.get("title")
            taken = MockTestModel.objects.filter(title=title).exclude(id=_pk(test_id)).exists()
            if taken:
                raise PersistenceConflict(
                    "Mock test with this title already exists",
                    detail={"title": title},
                ) from e
            # 문항 삭제 경합 등 (FK / 연결 unique)
            raise PersistenceConflict(
                "Mock test changed concurrently; reload and retry",
                detail={"test_id": test_id},
            ) from e
        return str(m.id)
