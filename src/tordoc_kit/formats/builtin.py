# src/tordoc_kit/formats/builtin.py

"""Formats of the relay descriptor archives published by CollecTor.

See https://metrics.torproject.org/collector.html#data-formats
"""

from .format import DocumentFormat

END_SIGNATURE = "-----END SIGNATURE-----\n"

SERVER_DESCRIPTOR = DocumentFormat(
    name="server-descriptor",
    description="Relay server descriptors, one signed descriptor per blurb",
    annotations=["@type server-descriptor 1.0"],
    pattern=END_SIGNATURE,
    offset=len(END_SIGNATURE),
)

EXTRA_INFO = DocumentFormat(
    name="extra-info",
    description="Relay extra-info descriptors, one signed descriptor per blurb",
    annotations=["@type extra-info 1.0"],
    pattern=END_SIGNATURE,
    offset=len(END_SIGNATURE),
)

BUILTIN_FORMATS: tuple[DocumentFormat, ...] = (SERVER_DESCRIPTOR, EXTRA_INFO)
