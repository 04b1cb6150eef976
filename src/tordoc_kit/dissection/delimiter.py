# src/tordoc_kit/dissection/delimiter.py

from dataclasses import dataclass

from tordoc_kit.errors import InvalidDelimiterError


@dataclass(frozen=True)
class Delimiter:
    """How to cut a flat document into blurbs.

    The cut point lies ``offset`` characters past the start of each match of
    ``pattern``; the first ``skip`` matches are absorbed without emitting.

    Immutable: every dissection run counts skips down on its own copy.
    """

    pattern: str
    offset: int
    skip: int = 0

    def validate(self) -> None:
        """Raise InvalidDelimiterError unless every cut point advances."""
        if not self.pattern:
            raise InvalidDelimiterError("Delimiter pattern must not be empty", self)
        if self.offset < 0:
            raise InvalidDelimiterError("Delimiter offset must be >= 0", self)
        if self.skip < 0:
            raise InvalidDelimiterError("Delimiter skip must be >= 0", self)
        if self.offset < len(self.pattern):
            raise InvalidDelimiterError(
                f"Delimiter offset must be >= len(pattern) ({len(self.pattern)})",
                self,
            )


@dataclass(frozen=True)
class QueueUnit:
    """One unit handed from the producer to the consumer.

    Either a blurb, or an empty blurb paired with the error that ended the run.
    """

    blurb: str = ""
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
