# src/tordoc_kit/reader.py

"""Open an annotated document, validate it, and stream its blurbs."""

import logging
from collections.abc import Generator, Iterator
from pathlib import Path

from tordoc_kit.annotations.validator import check_annotation
from tordoc_kit.dissection.delimiter import Delimiter, QueueUnit
from tordoc_kit.dissection.dissector import DocumentDissector
from tordoc_kit.formats.format import DocumentFormat

logger = logging.getLogger(__name__)


def iter_document(
    path: str | Path,
    document_format: DocumentFormat,
    dissector: DocumentDissector | None = None,
) -> Generator[QueueUnit, None, None]:
    """Yield the units of the document at ``path``.

    The annotation is checked before this returns, so an unsupported file
    fails fast. The body is opened again by the returned generator, starting
    right after the annotation line, and closed once the generator ends or is
    closed. A generator that is never iterated holds no open file.

    Raises:
        OSError: The file cannot be opened.
        AnnotationError: The first line is malformed or not accepted.
        InvalidDelimiterError: The format's delimiter cannot make progress.
    """
    dissector = dissector or DocumentDissector()
    delimiter = document_format.delimiter()
    delimiter.validate()

    with open(path, "rb") as f:
        annotation = check_annotation(
            f, document_format.accepted(), dissector.metrics_hook
        )
        body_offset = f.tell()

    logger.info("Reading %s as %s (%s)", path, document_format.name, annotation)
    return _iter_body(path, body_offset, delimiter, dissector)


def _iter_body(
    path: str | Path,
    body_offset: int,
    delimiter: Delimiter,
    dissector: DocumentDissector,
) -> Generator[QueueUnit, None, None]:
    with open(path, "rb") as f:
        f.seek(body_offset)
        units = dissector.dissect(f, delimiter)
        try:
            yield from units
        finally:
            units.close()


def iter_blurbs(
    path: str | Path,
    document_format: DocumentFormat,
    dissector: DocumentDissector | None = None,
) -> Iterator[str]:
    """Like iter_document, but yield plain blurbs.

    Raises:
        ReadFailureError: While iterating, if the body could not be read.
        DissectionError: While iterating, if dissection failed otherwise.
    """
    return _raise_errors(iter_document(path, document_format, dissector))


def _raise_errors(units: Iterator[QueueUnit]) -> Iterator[str]:
    for unit in units:
        if unit.error is not None:
            raise unit.error
        yield unit.blurb
