# src/tordoc_kit/annotations/validator.py

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import IO, AnyStr

from tordoc_kit.errors import MalformedAnnotationError, UnsupportedAnnotationError
from tordoc_kit.observability import names
from tordoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .annotation import ANNOTATION_PREFIX, Annotation

logger = logging.getLogger(__name__)


def parse_annotation(line: str) -> Annotation:
    """Parse the first line of a document into an Annotation.

    Expects exactly ``@type <type> <major>.<minor>``, split on single spaces.

    Raises:
        MalformedAnnotationError: Wrong token count, wrong prefix, or a
            version that does not split into exactly two parts.
    """
    words = line.split(" ")
    if len(words) != 3 or words[0] != ANNOTATION_PREFIX:
        raise MalformedAnnotationError(line)

    version = words[2].split(".")
    if len(version) != 2:
        raise MalformedAnnotationError(line)

    return Annotation(type=words[1], major=version[0], minor=version[1])


def validate_annotation(
    line: str,
    accepted: Iterable[Annotation],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Annotation:
    """Check that ``line`` names one of the ``accepted`` annotations.

    Returns:
        The parsed annotation.

    Raises:
        MalformedAnnotationError: The line cannot be parsed.
        UnsupportedAnnotationError: The line parses but is not accepted.
    """
    accepted = frozenset(accepted)
    metrics_hook.increment(names.ANNOTATION_CHECKS_TOTAL)

    try:
        observed = parse_annotation(line)
    except MalformedAnnotationError:
        logger.error("Malformed annotation: %r", line)
        metrics_hook.increment(
            names.ANNOTATION_REJECTED_TOTAL, labels={"reason": "malformed"}
        )
        raise

    if observed not in accepted:
        logger.error(
            "Unsupported annotation %r, accepted: %s",
            line,
            sorted(str(a) for a in accepted),
        )
        metrics_hook.increment(
            names.ANNOTATION_REJECTED_TOTAL, labels={"reason": "unsupported"}
        )
        raise UnsupportedAnnotationError(line, accepted)

    logger.debug("Accepted annotation: %s", observed)
    return observed


def read_first_line(source: IO[AnyStr]) -> str:
    """Read one line from a binary or text stream, without its terminator.

    Bytes are decoded as UTF-8; annotation lines are plain ASCII.
    """
    raw = source.readline()
    line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


def check_annotation(
    source: IO[AnyStr],
    accepted: Iterable[Annotation],
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> Annotation:
    """Validate the annotation on the first line of an open stream.

    The stream is left positioned right after the annotation line, so the
    remaining content is the document body.
    """
    return validate_annotation(read_first_line(source), accepted, metrics_hook)


def read_annotation(path: str | Path) -> Annotation:
    """Return the annotation of the file at ``path``.

    Raises:
        OSError: The file cannot be opened.
        MalformedAnnotationError: The first line is not an annotation.
    """
    with open(path, "rb") as f:
        line = read_first_line(f)
    logger.debug("Read annotation line from %s: %r", path, line)
    return parse_annotation(line)
