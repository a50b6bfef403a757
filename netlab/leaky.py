"""Leaky bucket traffic shaping simulation."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class BucketStep:
    """What happened to the bucket when one packet burst arrived.

    ``buffered`` is the fill level reported right after the arrival; on
    overflow it is the level before the burst, as the bucket is then
    topped up to its size. ``remaining`` is the level after draining.
    """

    incoming: int
    dropped: int
    buffered: int
    remaining: int


class LeakyBucket:
    """A bucket of fixed size that drains at a constant rate per step."""

    def __init__(self, size: int, outgoing_rate: int) -> None:
        self.size = size
        self.outgoing_rate = outgoing_rate
        self.stored = 0

    def offer(self, incoming: int) -> BucketStep:
        """Add a burst of ``incoming`` packets, then drain one step."""
        free = self.size - self.stored
        if incoming <= free:
            self.stored += incoming
            dropped = 0
            buffered = self.stored
        else:
            dropped = incoming - free
            buffered = self.stored
            self.stored = self.size

        if self.stored >= self.outgoing_rate:
            self.stored -= self.outgoing_rate
        else:
            self.stored = 0

        return BucketStep(incoming, dropped, buffered, self.stored)


def simulate(size: int, outgoing_rate: int, packets: Iterable[int]) -> list[BucketStep]:
    """Run a fresh bucket over a sequence of bursts."""
    bucket = LeakyBucket(size, outgoing_rate)
    return [bucket.offer(incoming) for incoming in packets]


def _read_int(prompt: str) -> int:
    return int(input(prompt).strip())


def _report(step: BucketStep, size: int) -> None:
    print(f"The incoming packet size is {step.incoming}")
    if step.dropped:
        print(f"Dropped {step.dropped} number of packets")
    print(f"Bucket buffer size {step.buffered} out of {size}")
    print(f"After outgoing, {step.remaining} packets left out of {size} in buffer")


def main(argv: list[str] | None = None) -> int:
    """Ask for the bucket parameters and bursts, and report each step."""
    argparse.ArgumentParser(
        prog="netlab-leaky",
        description="Interactive leaky bucket simulation.",
    ).parse_args(argv)

    try:
        size = _read_int("Enter the bucket size: ")
        outgoing = _read_int("Enter the outgoing rate: ")
        count = _read_int("Enter the number of inputs: ")
        bucket = LeakyBucket(size, outgoing)
        for _ in range(max(count, 0)):
            step = bucket.offer(_read_int("Enter the incoming packet size: "))
            _report(step, size)
    except (ValueError, EOFError) as exc:
        print(f"\nInvalid input: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())