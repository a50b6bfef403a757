import io
import sys

import pytest

from netlab.leaky import BucketStep, LeakyBucket, main, simulate


def test_accepts_packets_that_fit():
    bucket = LeakyBucket(10, 0)
    assert bucket.offer(7) == BucketStep(incoming=7, dropped=0, buffered=7, remaining=7)


def test_overflow_drops_excess_and_fills_bucket():
    bucket = LeakyBucket(10, 0)
    bucket.offer(7)
    step = bucket.offer(5)
    assert step.dropped == 2
    assert step.buffered == 7
    assert step.remaining == 10


def test_drain_never_goes_below_empty():
    bucket = LeakyBucket(10, 4)
    step = bucket.offer(3)
    assert step.buffered == 3
    assert step.remaining == 0
    assert bucket.stored == step.remaining


def test_simulate_yields_one_step_per_burst():
    packets = [4, 8, 1, 12, 0, 6]
    steps = simulate(10, 3, packets)
    assert [step.incoming for step in steps] == packets


@pytest.mark.parametrize("size,rate", [(10, 3), (5, 5), (20, 1), (8, 0)])
def test_simulate_invariants(size, rate):
    packets = [4, 8, 1, 12, 0, 6, 9, 3, 15, 2]
    previous = 0
    for step in simulate(size, rate, packets):
        assert 0 <= step.remaining <= size
        assert step.dropped >= 0
        assert step.buffered == previous + (step.incoming if step.dropped == 0 else 0)
        if step.dropped:
            assert step.buffered + step.incoming - step.dropped == size
        previous = step.remaining


def test_main_reports_each_step(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10\n0\n2\n7\n5\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "The incoming packet size is 7" in out
    assert "Bucket buffer size 7 out of 10" in out
    assert "The incoming packet size is 5" in out
    assert "Dropped 2 number of packets" in out
    assert "After outgoing, 10 packets left out of 10 in buffer" in out


def test_main_with_no_inputs(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10\n3\n0\n"))
    assert main([]) == 0
    assert "incoming packet size is" not in capsys.readouterr().out


def test_main_rejects_non_numeric_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n"))
    assert main([]) == 1


def test_main_fails_on_truncated_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("10\n3\n2\n4\n"))
    assert main([]) == 1