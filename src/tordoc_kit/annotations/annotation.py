# src/tordoc_kit/annotations/annotation.py

from dataclasses import dataclass

ANNOTATION_PREFIX = "@type"


@dataclass(frozen=True)
class Annotation:
    """A document's declared type and version.

    Major and minor stay strings: equality is exact, so "2" and "02" differ.
    """

    type: str
    major: str
    minor: str

    def __str__(self) -> str:
        return f"{ANNOTATION_PREFIX} {self.type} {self.major}.{self.minor}"
