"""Tests for schema definitions."""

import json

import pytest
from pydantic import ValidationError

from schemas import BatchReport, DocumentReport, PageResult, WriteFailure


class TestPageResult:
    """Tests for the PageResult dataclass."""

    def test_creation(self):
        """PageResult stores its fields."""
        result = PageResult(document_name="report", page_index=2, text="Hello")

        assert result.document_name == "report"
        assert result.page_index == 2
        assert result.text == "Hello"

    def test_defaults(self):
        """Text defaults to empty and images to an empty list."""
        result = PageResult(document_name="report", page_index=0)

        assert result.text == ""
        assert result.images == []

    def test_images_not_shared(self):
        """Each PageResult gets its own images list."""
        first = PageResult(document_name="a", page_index=0)
        second = PageResult(document_name="a", page_index=1)
        first.images.append((0, b"png"))

        assert second.images == []


class TestDocumentReport:
    """Tests for the DocumentReport model."""

    def test_minimal(self):
        """A report needs only the document name and source path."""
        report = DocumentReport(document_name="doc", source_path="/in/doc.pdf")

        assert report.status == "completed"
        assert report.page_count == 0
        assert report.write_failures == []
        assert report.error is None

    def test_invalid_status(self):
        """Unknown status values are rejected."""
        with pytest.raises(ValidationError):
            DocumentReport(document_name="doc", source_path="/in/doc.pdf", status="done")

    def test_json_round_trip(self):
        """Reports serialize with their write failures."""
        report = DocumentReport(
            document_name="doc",
            source_path="/in/doc.pdf",
            page_count=2,
            pages_written=1,
            write_failures=[WriteFailure(page_index=1, path="/out/doc/1", error="disk full")],
        )

        data = json.loads(report.model_dump_json())

        assert data["write_failures"][0]["error"] == "disk full"
        assert DocumentReport.model_validate(data) == report


class TestBatchReport:
    """Tests for BatchReport summary properties."""

    def test_counts(self):
        """succeeded, failed and pages_written summarize the documents."""
        report = BatchReport(
            input_dir="/in",
            output_dir="/out",
            documents=[
                DocumentReport(document_name="a", source_path="/in/a.pdf", pages_written=3),
                DocumentReport(document_name="b", source_path="/in/b.pdf", pages_written=1),
                DocumentReport(document_name="c", source_path="/in/c.pdf", status="failed"),
            ],
        )

        assert report.succeeded == 2
        assert report.failed == 1
        assert report.pages_written == 4

    def test_empty(self):
        """An empty batch has zero counts."""
        report = BatchReport(input_dir="/in", output_dir="/out")

        assert report.succeeded == 0
        assert report.failed == 0
        assert report.pages_written == 0
