# src/tordoc_kit/dissection/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class DissectorConfig:
    """Configuration for DocumentDissector.

    Immutable. Explicit. No magic defaults from environment.
    """

    queue_size: int = 128  # 0 means unbounded
    encoding: str = "utf-8"
    # Undecodable bytes survive as lone surrogates; encode blurbs back with the
    # same handler to recover them. "strict" turns them into a read failure.
    errors: str = "surrogateescape"
    poll_interval: float = 0.1  # seconds between cancellation checks on a full queue

    def __post_init__(self) -> None:
        if self.queue_size < 0:
            raise ValueError("queue_size must be >= 0")
        if self.poll_interval <= 0:
            raise ValueError("poll_interval must be > 0")
