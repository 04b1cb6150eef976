from .builtin import BUILTIN_FORMATS, EXTRA_INFO, SERVER_DESCRIPTOR
from .format import DocumentFormat
from .formats_library import FormatsLibrary

__all__ = [
    "BUILTIN_FORMATS",
    "DocumentFormat",
    "EXTRA_INFO",
    "FormatsLibrary",
    "SERVER_DESCRIPTOR",
]
