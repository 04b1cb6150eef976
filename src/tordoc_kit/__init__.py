# Annotations
from .annotations import (
    Annotation,
    check_annotation,
    parse_annotation,
    read_annotation,
    validate_annotation,
)

# Conversions
from .conversions import base64_to_hex, string_to_port

# Dissection
from .dissection import (
    Delimiter,
    DissectorConfig,
    DocumentDissector,
    QueueUnit,
    split_blurbs,
)

# Errors
from .errors import (
    AnnotationError,
    DissectionError,
    InvalidDelimiterError,
    MalformedAnnotationError,
    ReadFailureError,
    TordocError,
    UnsupportedAnnotationError,
)

# Formats
from .formats import DocumentFormat, FormatsLibrary

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Reader
from .reader import iter_blurbs, iter_document

__all__ = [
    # Annotations
    "Annotation",
    "check_annotation",
    "parse_annotation",
    "read_annotation",
    "validate_annotation",
    # Conversions
    "base64_to_hex",
    "string_to_port",
    # Dissection
    "Delimiter",
    "DissectorConfig",
    "DocumentDissector",
    "QueueUnit",
    "split_blurbs",
    # Errors
    "AnnotationError",
    "DissectionError",
    "InvalidDelimiterError",
    "MalformedAnnotationError",
    "ReadFailureError",
    "TordocError",
    "UnsupportedAnnotationError",
    # Formats
    "DocumentFormat",
    "FormatsLibrary",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Reader
    "iter_blurbs",
    "iter_document",
]
