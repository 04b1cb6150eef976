# src/tordoc_kit/dissection/__init__.py

"""Delimiter-driven dissection of flat documents into blurbs.

A producer thread reads the whole document, cuts it at every match of the
delimiter pattern, and hands the blurbs to the caller through a FIFO queue.

Example:
    >>> from tordoc_kit.dissection import Delimiter, DocumentDissector
    >>>
    >>> dissector = DocumentDissector()
    >>> units = dissector.dissect("AxxBxxCxx", Delimiter(pattern="xx", offset=2))
    >>> [unit.blurb for unit in units]
    ['Axx', 'Bxx', 'Cxx']
"""

from .config import DissectorConfig
from .delimiter import Delimiter, QueueUnit
from .dissector import DocumentDissector, split_blurbs

__all__ = [
    "Delimiter",
    "DissectorConfig",
    "DocumentDissector",
    "QueueUnit",
    "split_blurbs",
]
