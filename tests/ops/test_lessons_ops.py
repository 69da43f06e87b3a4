"""Tests for primer.ops.lessons: the operation layer over registry and runner."""

import pytest

from primer.core.errors import ErrorCategory
from primer.core.settings import PrimerSettings
from primer.ops import (
    OperationContext,
    get_lesson,
    list_lessons,
    list_topics,
    run_lesson,
    verify_lessons,
)
from primer.ops.requests import (
    GetLessonRequest,
    ListLessonsRequest,
    RunLessonRequest,
    VerifyLessonsRequest,
)
from primer.registry import Topic, register_lesson


@pytest.fixture
def ctx(tmp_path):
    return OperationContext(settings=PrimerSettings(workdir=tmp_path))


@pytest.fixture
def broken_lesson():
    """Register a type_hints lesson whose output never matches."""

    def demo(ctx):
        """Always wrong."""
        print("actual")

    register_lesson(Topic.TYPE_HINTS, "broken_demo", expected=["documented"])(demo)
    return "type_hints/broken_demo"


class TestListTopics:
    def test_all_topics_in_order(self, ctx):
        result = list_topics(ctx)
        assert result.success
        assert [t.topic for t in result.data] == [t.value for t in Topic]
        assert [t.order for t in result.data] == list(range(1, len(Topic) + 1))
        assert all(t.lessons > 0 for t in result.data)

    def test_titles(self, ctx):
        titles = {t.topic: t.title for t in list_topics(ctx).data}
        assert titles["file_io"] == "File I/O"
        assert titles["control_flow"] == "Control Flow"


class TestListLessons:
    def test_first_page(self, ctx):
        result = list_lessons(ctx, ListLessonsRequest(limit=3))
        assert result.success
        assert [s.name for s in result.data] == [
            "variables/basic_types",
            "variables/strings",
            "variables/f_strings",
        ]
        assert result.total > 3
        assert result.has_more

    def test_offset(self, ctx):
        everything = list_lessons(ctx, ListLessonsRequest(limit=500)).data
        page = list_lessons(ctx, ListLessonsRequest(limit=2, offset=4)).data
        assert [s.name for s in page] == [s.name for s in everything[4:6]]

    def test_topic_filter(self, ctx):
        result = list_lessons(ctx, ListLessonsRequest(topic="classes"))
        assert {s.topic for s in result.data} == {"classes"}
        assert result.total == len(result.data)
        assert not result.has_more

    def test_unknown_topic(self, ctx):
        result = list_lessons(ctx, ListLessonsRequest(topic="cooking"))
        assert not result.success
        assert result.error.code == "VALIDATION_FAILED"
        assert result.error.category == ErrorCategory.VALIDATION
        assert "variables" in result.error.details["available"]

    @pytest.mark.parametrize(("limit", "offset"), [(0, 0), (-1, 0), (10, -1)])
    def test_bad_paging(self, ctx, limit, offset):
        result = list_lessons(ctx, ListLessonsRequest(limit=limit, offset=offset))
        assert not result.success
        assert result.error.code == "VALIDATION_FAILED"


class TestGetLesson:
    def test_detail(self, ctx):
        result = get_lesson(ctx, GetLessonRequest(name="classes/person"))
        assert result.success
        detail = result.data
        assert detail.topic == "classes"
        assert detail.title == "A class bundles data with the functions that use it."
        assert detail.expected[-1] == "31"
        assert "def demo_person" in detail.source

    def test_not_found(self, ctx):
        result = get_lesson(ctx, GetLessonRequest(name="classes/ghost"))
        assert not result.success
        assert result.error.code == "NOT_FOUND"
        assert result.error.details["lesson"] == "classes/ghost"

    def test_empty_name(self, ctx):
        result = get_lesson(ctx, GetLessonRequest())
        assert result.error.code == "VALIDATION_FAILED"


class TestRunLesson:
    def test_passing(self, ctx):
        result = run_lesson(ctx, RunLessonRequest(name="functions/recursion"))
        assert result.success
        assert result.data.passed
        assert result.data.output == ["120", "[1, 1, 2, 6, 24, 120]"]
        assert result.warnings == []
        assert result.metadata["request_id"] == ctx.request_id

    def test_failing_lesson_is_still_ok(self, ctx, broken_lesson):
        result = run_lesson(ctx, RunLessonRequest(name=broken_lesson))
        assert result.success
        assert not result.data.passed
        assert result.warnings == [f"{broken_lesson} output differs from its documentation on 1 line(s)"]

    def test_not_found(self, ctx):
        result = run_lesson(ctx, RunLessonRequest(name="nope/nope"))
        assert result.error.code == "NOT_FOUND"

    def test_uses_configured_workdir(self, ctx, tmp_path):
        run_lesson(ctx, RunLessonRequest(name="file_io/write_and_read"))
        (scratch,) = tmp_path.iterdir()
        assert (scratch / "file.txt").exists()


class TestVerifyLessons:
    def test_everything_passes(self, ctx):
        result = verify_lessons(ctx, VerifyLessonsRequest())
        report = result.data
        assert result.success
        assert report.ok
        assert report.total == len(report.runs) == report.passed
        assert report.failed == report.skipped == 0

    def test_runs_get_distinct_ids(self, ctx):
        report = verify_lessons(ctx, VerifyLessonsRequest(topic="decorators")).data
        ids = [run.run_id for run in report.runs]
        assert len(ids) == len(set(ids)) == report.total

    def test_failure_reported(self, ctx, broken_lesson):
        result = verify_lessons(ctx, VerifyLessonsRequest(topic="type_hints"))
        report = result.data
        assert not report.ok
        assert report.failed == 1
        assert report.passed == report.total - 1
        assert any(broken_lesson in w for w in result.warnings)

    def test_fail_fast_skips_the_rest(self, ctx, broken_lesson):
        report = verify_lessons(ctx, VerifyLessonsRequest(topic="type_hints", fail_fast=True)).data
        assert report.failed == 1
        assert report.runs[-1].lesson == broken_lesson
        assert len(report.runs) + report.skipped == report.total

    def test_unknown_topic(self, ctx):
        result = verify_lessons(ctx, VerifyLessonsRequest(topic="cooking"))
        assert result.error.code == "VALIDATION_FAILED"
