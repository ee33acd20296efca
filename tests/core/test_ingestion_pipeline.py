"""Tests for the ingestion pipeline orchestrator."""

import pytest

from lecturelens.configs.ingestion import IngestionSettings
from lecturelens.core.ingestion import IngestionPipeline, RawFile
from lecturelens.core.ingestion.entrypoint import (
    UNKNOWN_CHAPTER,
    UNKNOWN_COURSE,
    make_document_id,
    split_course_path,
)
from lecturelens.core.ingestion.rate_limiter import FixedDelayRateLimiter


def _srt(text: str) -> bytes:
    return f"1\n00:00:01,000 --> 00:00:02,000\n{text}\n".encode()


class TestPathHelpers:
    """Test course/chapter derivation from relative paths."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("NodeCourse/01-Intro/lesson1.srt", ("NodeCourse", "01-Intro", "lesson1.srt")),
            ("NodeCourse/01-Intro/extra/lesson1.srt", ("NodeCourse", "01-Intro", "lesson1.srt")),
            ("PyCourse/lesson.vtt", ("PyCourse", UNKNOWN_CHAPTER, "lesson.vtt")),
            ("lesson.srt", (UNKNOWN_COURSE, UNKNOWN_CHAPTER, "lesson.srt")),
            ("Course\\Chapter\\a.srt", ("Course", "Chapter", "a.srt")),
        ],
    )
    def test_split_course_path(self, path: str, expected: tuple[str, str, str]) -> None:
        """Should take course and chapter from the first two directories."""
        assert split_course_path(path) == expected

    def test_make_document_id_replaces_unsafe_characters(self) -> None:
        """Should keep only letters, digits and underscores."""
        assert make_document_id("NodeCourse", "01-Intro", "lesson1.srt") == (
            "NodeCourse_01_Intro_lesson1_srt"
        )


class TestIngest:
    """Test ingest() over an uploaded folder."""

    def test_builds_documents_and_structure(self) -> None:
        """Should parse subtitle files, skip others and record the course tree."""
        pipeline = IngestionPipeline()
        files = [
            RawFile(content=_srt("Welcome to Node"), path="NodeCourse/01-Intro/lesson1.srt"),
            RawFile(content=b"not a subtitle", path="NodeCourse/01-Intro/notes.txt"),
            RawFile(
                content=b"WEBVTT\n\n00:00:01.000 --> 00:00:02.000\nPython basics\n",
                path="PyCourse/lesson.vtt",
            ),
        ]

        result = pipeline.ingest(files)

        assert result.files_processed == 2
        assert result.files_skipped == 1
        assert [d.id for d in result.documents] == [
            "NodeCourse_01_Intro_lesson1_srt",
            "PyCourse_Unknown_Chapter_lesson_vtt",
        ]
        first = result.documents[0]
        assert first.content == "Welcome to Node"
        assert first.metadata.original_path == "NodeCourse/01-Intro/lesson1.srt"
        assert first.metadata.type == ".srt"
        assert result.course_structure == {
            "NodeCourse": {"01-Intro": ["lesson1.srt"]},
            "PyCourse": {UNKNOWN_CHAPTER: ["lesson.vtt"]},
        }

    def test_empty_file_produces_no_document(self) -> None:
        """Should count the file as processed without creating a document."""
        result = IngestionPipeline().ingest([RawFile(content=b"", path="C/Ch/a.srt")])

        assert result.files_processed == 1
        assert result.documents == []
        assert result.course_structure == {}

    def test_colliding_ids_get_suffix(self) -> None:
        """Should keep ids unique when sanitizing makes two paths collide."""
        files = [
            RawFile(content=_srt("one"), path="A/B/x-y.srt"),
            RawFile(content=_srt("two"), path="A/B/x_y.srt"),
        ]

        result = IngestionPipeline().ingest(files)

        assert [d.id for d in result.documents] == ["A_B_x_y_srt", "A_B_x_y_srt_2"]

    def test_uses_configured_extensions(self) -> None:
        """Should skip formats not in supported_extensions."""
        pipeline = IngestionPipeline(settings=IngestionSettings(supported_extensions=[".srt"]))
        files = [RawFile(content=b"WEBVTT\n", path="C/Ch/a.vtt")]

        result = pipeline.ingest(files)

        assert result.files_skipped == 1
        assert result.files_processed == 0


class TestEmbedSession:
    """Test the embed_session pass-through."""

    @pytest.mark.asyncio
    async def test_end_to_end(self, fake_embedder, fake_clock) -> None:
        """Should ingest an SRT file and embed its single chunk."""
        pipeline = IngestionPipeline()
        content = (
            "1\n00:00:01,000 --> 00:00:02,000\nHello [music] world\n\n"
            "2\n00:00:03,000 --> 00:00:04,000\n(laughs) 42 times\n"
        ).encode()
        ingest = pipeline.ingest([RawFile(content=content, path="C/Ch/a.srt")])

        result = await pipeline.embed_session(
            ingest.documents,
            [],
            fake_embedder,
            rate_limiter=FixedDelayRateLimiter(clock=fake_clock),
        )

        assert ingest.documents[0].content == "Hello world times"
        assert [r.id for r in result.records] == ["C_Ch_a_srt"]
        assert result.records[0].content == "Hello world times"
        assert fake_clock.sleeps == [2.0, 5.0]
