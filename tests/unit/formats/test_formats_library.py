from pathlib import Path

import pytest
from pydantic import ValidationError

from tordoc_kit.annotations.annotation import Annotation
from tordoc_kit.dissection.delimiter import Delimiter
from tordoc_kit.formats.builtin import END_SIGNATURE, SERVER_DESCRIPTOR
from tordoc_kit.formats.format import DocumentFormat
from tordoc_kit.formats.formats_library import FormatsLibrary


@pytest.fixture
def formats_dir(tmp_path: Path) -> Path:
    """Create a temp directory with sample YAML format files."""
    (tmp_path / "records.yaml").write_text(
        """name: records
description: Blank-line separated records
annotations:
  - "@type records 1.0"
  - "@type records 1.1"
pattern: "\\n\\n"
offset: 2
"""
    )

    (tmp_path / "votes.yaml").write_text(
        """name: votes
annotations:
  - "@type votes 3.0"
pattern: "END\\n"
offset: 4
skip: 1
"""
    )

    return tmp_path


class TestDocumentFormat:
    def test_accepted_parses_annotations(self) -> None:
        fmt = DocumentFormat(
            name="records",
            annotations=["@type records 1.0", "@type records 1.1"],
            pattern="\n\n",
            offset=2,
        )

        assert fmt.accepted() == frozenset(
            {Annotation("records", "1", "0"), Annotation("records", "1", "1")}
        )

    def test_delimiter_is_built_from_fields(self) -> None:
        fmt = DocumentFormat(
            name="votes", annotations=["@type votes 3.0"], pattern="END", offset=3, skip=1
        )

        assert fmt.delimiter() == Delimiter(pattern="END", offset=3, skip=1)

    def test_rejects_malformed_annotation(self) -> None:
        with pytest.raises(ValidationError):
            DocumentFormat(name="x", annotations=["@type x"], pattern="a", offset=1)

    def test_rejects_empty_annotations(self) -> None:
        with pytest.raises(ValidationError):
            DocumentFormat(name="x", annotations=[], pattern="a", offset=1)

    def test_rejects_degenerate_delimiter(self) -> None:
        with pytest.raises(ValidationError):
            DocumentFormat(
                name="x", annotations=["@type x 1.0"], pattern="abc", offset=1
            )

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError):
            DocumentFormat(
                name="x",
                annotations=["@type x 1.0"],
                pattern="a",
                offset=1,
                flavour="microdesc",
            )

    def test_builtin_server_descriptor_cuts_after_signature(self) -> None:
        assert SERVER_DESCRIPTOR.delimiter() == Delimiter(
            pattern=END_SIGNATURE, offset=len(END_SIGNATURE)
        )


class TestFormatsLibrary:
    def test_builtin_formats_are_loaded(self) -> None:
        library = FormatsLibrary()

        assert library.list() == ["extra-info", "server-descriptor"]

    def test_builtin_formats_can_be_excluded(self) -> None:
        library = FormatsLibrary(include_builtin=False)

        assert library.list() == []

    def test_loads_formats_from_directory(self, formats_dir: Path) -> None:
        library = FormatsLibrary(str(formats_dir), include_builtin=False)

        assert library.list() == ["records", "votes"]

    def test_yaml_values_are_loaded(self, formats_dir: Path) -> None:
        library = FormatsLibrary(str(formats_dir))

        votes = library.get("votes")
        records = library.get("records")

        assert votes.delimiter() == Delimiter(pattern="END\n", offset=4, skip=1)
        assert records.pattern == "\n\n"
        assert records.description == "Blank-line separated records"

    def test_get_unknown_raises(self) -> None:
        library = FormatsLibrary()

        with pytest.raises(KeyError, match="not found"):
            library.get("microdescriptor")

    def test_register_duplicate_raises(self) -> None:
        library = FormatsLibrary()

        with pytest.raises(ValueError, match="already registered"):
            library.register(SERVER_DESCRIPTOR)

    def test_yaml_duplicate_of_builtin_raises(self, tmp_path: Path) -> None:
        (tmp_path / "dup.yaml").write_text(
            """name: server-descriptor
annotations:
  - "@type server-descriptor 1.0"
pattern: "x"
offset: 1
"""
        )

        with pytest.raises(ValueError, match="already registered"):
            FormatsLibrary(str(tmp_path))

    def test_invalid_yaml_format_raises(self, tmp_path: Path) -> None:
        (tmp_path / "bad.yaml").write_text(
            """name: bad
annotations:
  - "not an annotation"
pattern: "x"
offset: 1
"""
        )

        with pytest.raises(ValidationError):
            FormatsLibrary(str(tmp_path))

    def test_ignores_non_yaml_files(self, formats_dir: Path) -> None:
        (formats_dir / "notes.txt").write_text("not a format")

        library = FormatsLibrary(str(formats_dir), include_builtin=False)

        assert len(library.list()) == 2
