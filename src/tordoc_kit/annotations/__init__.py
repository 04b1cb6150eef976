from .annotation import Annotation
from .validator import (
    check_annotation,
    parse_annotation,
    read_annotation,
    read_first_line,
    validate_annotation,
)

__all__ = [
    "Annotation",
    "check_annotation",
    "parse_annotation",
    "read_annotation",
    "read_first_line",
    "validate_annotation",
]
