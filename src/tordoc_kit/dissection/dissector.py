# src/tordoc_kit/dissection/dissector.py

import logging
import queue
import threading
from collections.abc import Generator, Iterator
from time import monotonic
from typing import IO, Union

from tordoc_kit.errors import DissectionError, ReadFailureError, TordocError
from tordoc_kit.observability import names
from tordoc_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import DissectorConfig
from .delimiter import Delimiter, QueueUnit

logger = logging.getLogger(__name__)

Source = Union[IO[bytes], IO[str], bytes, str]

# Placed on the queue once per run, on every exit path of the producer.
_END = object()


def split_blurbs(content: str, delimiter: Delimiter) -> Iterator[str]:
    """Split ``content`` into blurbs synchronously.

    Same cuts as DocumentDissector.dissect, without the producer thread.

    Raises:
        InvalidDelimiterError: Immediately, before any blurb is produced.
    """
    delimiter.validate()
    return (blurb for blurb, skipped in _cut(content, delimiter) if not skipped)


def _cut(content: str, delimiter: Delimiter) -> Iterator[tuple[str, bool]]:
    """Yield ``(blurb, skipped)`` for every match of the delimiter pattern.

    Text after the last match is never yielded.
    """
    skip = delimiter.skip
    end = len(content)
    cursor = 0

    while True:
        position = content.find(delimiter.pattern, cursor)
        if position == -1:
            return

        # Clamp when the offset reaches past the end of the document
        cut = min(position + delimiter.offset, end)

        if skip > 0:
            skip -= 1
            yield content[cursor:cut], True
        else:
            yield content[cursor:cut], False

        cursor = cut


class DocumentDissector:
    """Streams the blurbs of a document from a producer thread.

    Each call to ``dissect`` is an independent run with its own thread, queue,
    and skip counter. Usage:

        dissector = DocumentDissector()
        with open(path, "rb") as f:
            for unit in dissector.dissect(f, Delimiter("\\n-----END\\n", 10)):
                if not unit.ok:
                    raise unit.error
                handle(unit.blurb)

    Leaving the loop early closes the generator, which tells the producer to
    stop instead of blocking on a full queue.
    """

    def __init__(
        self,
        config: DissectorConfig = DissectorConfig(),
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self.metrics_hook = metrics_hook
        logger.debug(
            "Initialized DocumentDissector with queue_size=%s, encoding=%s",
            config.queue_size,
            config.encoding,
        )

    def dissect(
        self, source: Source, delimiter: Delimiter
    ) -> Generator[QueueUnit, None, None]:
        """Dissect ``source`` into units, in document order.

        Args:
            source: A readable stream (binary or text), or the content itself.
                The whole content is read up front by the producer thread.
            delimiter: Where to cut. Validated before anything is started.

        Returns:
            A generator of QueueUnit. The producer thread starts on the first
            ``next()``. A failed read yields a single unit carrying a
            ReadFailureError and then ends; any other failure of the producer
            ends the sequence with a unit carrying a DissectionError.

        Raises:
            InvalidDelimiterError: The delimiter could not make progress.
        """
        delimiter.validate()
        return self._consume(source, delimiter)

    def _consume(
        self, source: Source, delimiter: Delimiter
    ) -> Generator[QueueUnit, None, None]:
        units: queue.Queue = queue.Queue(maxsize=self._config.queue_size)
        stop = threading.Event()
        producer = threading.Thread(
            target=self._produce,
            args=(source, delimiter, units, stop),
            name="tordoc-dissector",
            daemon=True,
        )
        producer.start()

        try:
            while True:
                unit = units.get()
                if unit is _END:
                    return
                yield unit
        finally:
            stop.set()

    def _produce(
        self,
        source: Source,
        delimiter: Delimiter,
        units: queue.Queue,
        stop: threading.Event,
    ) -> None:
        try:
            self._run(source, delimiter, units, stop)
        except Exception as exc:
            if not isinstance(exc, TordocError):
                failure = DissectionError(f"Dissection failed: {exc!r}")
                failure.__cause__ = exc
                exc = failure
            logger.error("Dissection failed: %s", exc)
            self._put(units, QueueUnit(error=exc), stop)
        finally:
            self._put(units, _END, stop)

    def _run(
        self,
        source: Source,
        delimiter: Delimiter,
        units: queue.Queue,
        stop: threading.Event,
    ) -> None:
        start = monotonic()
        emitted = 0
        skipped = 0
        self.metrics_hook.increment(names.DISSECTION_RUNS_TOTAL)

        try:
            content = self._read(source)
        except Exception as exc:
            self.metrics_hook.increment(
                names.DISSECTION_ERRORS_TOTAL, labels={"reason": "read"}
            )
            raise ReadFailureError(f"Failed to read document content: {exc!r}") from exc

        self.metrics_hook.record_gauge(names.DISSECTION_DOCUMENT_SIZE, len(content))
        logger.debug(
            "Dissecting %d characters on pattern %r", len(content), delimiter.pattern
        )

        for blurb, is_skipped in _cut(content, delimiter):
            if is_skipped:
                skipped += 1
                continue
            if not self._put(units, QueueUnit(blurb=blurb), stop):
                logger.info("Dissection cancelled after %d blurbs", emitted)
                self.metrics_hook.increment(names.DISSECTION_CANCELLED_TOTAL)
                break
            emitted += 1

        # Recorded before the end sentinel so a drained run has all its metrics
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DISSECTION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.DISSECTION_BLURBS_EMITTED, emitted)
        self.metrics_hook.increment(names.DISSECTION_BLURBS_SKIPPED, skipped)
        logger.info(
            "Dissection finished: emitted=%d, skipped=%d, elapsed_ms=%.1f",
            emitted,
            skipped,
            elapsed_ms,
        )

    def _read(self, source: Source) -> str:
        raw = source if isinstance(source, (str, bytes)) else source.read()
        if isinstance(raw, bytes):
            return raw.decode(self._config.encoding, self._config.errors)
        if not isinstance(raw, str):
            raise TypeError(f"read() returned {type(raw).__name__}, not bytes or str")
        return raw

    def _put(self, units: queue.Queue, item: object, stop: threading.Event) -> bool:
        """Put ``item`` unless the consumer has gone away.

        Returns:
            False if the run was cancelled before the item could be queued.
        """
        while not stop.is_set():
            try:
                units.put(item, timeout=self._config.poll_interval)
                return True
            except queue.Full:
                continue
        return False
