import io
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from tordoc_kit.annotations.annotation import Annotation
from tordoc_kit.annotations.validator import (
    check_annotation,
    read_annotation,
    read_first_line,
    validate_annotation,
)
from tordoc_kit.errors import MalformedAnnotationError, UnsupportedAnnotationError
from tordoc_kit.observability import names

ACCEPTED = {Annotation("server-descriptor", "1", "0")}


class TestReadFirstLine:
    def test_binary_stream(self) -> None:
        assert read_first_line(io.BytesIO(b"@type T 1.0\nbody\n")) == "@type T 1.0"

    def test_text_stream(self) -> None:
        assert read_first_line(io.StringIO("@type T 1.0\nbody\n")) == "@type T 1.0"

    def test_strips_crlf(self) -> None:
        assert read_first_line(io.BytesIO(b"@type T 1.0\r\nbody")) == "@type T 1.0"

    def test_line_without_terminator(self) -> None:
        assert read_first_line(io.BytesIO(b"@type T 1.0")) == "@type T 1.0"

    def test_empty_stream(self) -> None:
        assert read_first_line(io.BytesIO(b"")) == ""


class TestCheckAnnotation:
    def test_accepts_and_leaves_stream_at_body(self) -> None:
        stream = io.BytesIO(b"@type server-descriptor 1.0\nrouter a\n")

        result = check_annotation(stream, ACCEPTED)

        assert result == Annotation("server-descriptor", "1", "0")
        assert stream.read() == b"router a\n"

    def test_rejects_unsupported_version(self) -> None:
        stream = io.BytesIO(b"@type server-descriptor 2.0\nrouter a\n")

        with pytest.raises(UnsupportedAnnotationError):
            check_annotation(stream, ACCEPTED)

    def test_rejects_missing_annotation(self) -> None:
        stream = io.BytesIO(b"router a 1.2.3.4 9001 0 0\n")

        with pytest.raises(MalformedAnnotationError):
            check_annotation(stream, ACCEPTED)


class TestReadAnnotation:
    def test_reads_annotation_from_file(self, tmp_path: Path) -> None:
        path = tmp_path / "descriptor"
        path.write_bytes(b"@type extra-info 1.0\nextra-info a\n")

        assert read_annotation(path) == Annotation("extra-info", "1", "0")

    def test_missing_file_raises_os_error(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            read_annotation(tmp_path / "missing")

    def test_unannotated_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "plain"
        path.write_text("hello world\n")

        with pytest.raises(MalformedAnnotationError):
            read_annotation(str(path))


class TestAnnotationMetrics:
    def test_accepted_check_increments_total_only(self) -> None:
        metrics_hook = MagicMock()

        validate_annotation("@type server-descriptor 1.0", ACCEPTED, metrics_hook)

        metrics_hook.increment.assert_called_once_with(names.ANNOTATION_CHECKS_TOTAL)

    def test_rejection_is_labelled(self) -> None:
        metrics_hook = MagicMock()

        with pytest.raises(UnsupportedAnnotationError):
            validate_annotation("@type server-descriptor 9.9", ACCEPTED, metrics_hook)

        metrics_hook.increment.assert_any_call(
            names.ANNOTATION_REJECTED_TOTAL, labels={"reason": "unsupported"}
        )

    def test_malformed_rejection_is_labelled(self) -> None:
        metrics_hook = MagicMock()

        with pytest.raises(MalformedAnnotationError):
            validate_annotation("garbage", ACCEPTED, metrics_hook)

        metrics_hook.increment.assert_any_call(
            names.ANNOTATION_REJECTED_TOTAL, labels={"reason": "malformed"}
        )
