import queue

import pytest

from rustdrill.lessons.threads import (
    Queue,
    count_jobs,
    offset_sums,
    run_workers,
    send_tx,
)


def drain(sink):
    items = []
    while not sink.empty():
        items.append(sink.get())
    return items


def test_run_workers_counts_every_thread(capsys):
    assert run_workers(5, 0) == 5
    lines = capsys.readouterr().out.splitlines()
    assert set(lines) == {f"thread {i} is complete" for i in range(5)}


def test_run_workers_with_no_threads(capsys):
    assert run_workers(0, 0) == 0
    assert capsys.readouterr().out == ""


def test_count_jobs_reaches_total(capsys):
    assert count_jobs(10, 0) == 10
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert all(line.startswith("jobs completed ") for line in lines)


def test_send_tx_delivers_every_value(capsys):
    source = Queue(interval=0)
    sink = queue.Queue()
    for sender in send_tx(source, sink):
        sender.join()
    received = drain(sink)
    assert len(received) == source.length
    assert sorted(received) == source.first_half + source.second_half
    assert [v for v in received if v in source.first_half] == source.first_half
    assert [v for v in received if v in source.second_half] == source.second_half
    assert capsys.readouterr().out.count("sending ") == source.length


def test_send_tx_custom_queue():
    source = Queue(length=3, first_half=[7], second_half=[8, 9], interval=0)
    sink = queue.Queue()
    senders = send_tx(source, sink)
    for sender in senders:
        sender.join()
    assert len(senders) == 2
    assert sorted(drain(sink)) == [7, 8, 9]


def test_offset_sums_cover_all_numbers():
    sums = offset_sums(range(100), 8)
    assert len(sums) == 8
    assert sum(sums) == sum(range(100))


def test_offset_sums_small_example():
    assert offset_sums([1, 2, 3, 4], 2) == [6, 4]
    assert offset_sums([5], 3) == [0, 0, 5]


def test_offset_sums_prints_each_offset(capsys):
    offset_sums([1, 2, 3, 4], 2)
    out = capsys.readouterr().out
    assert "Sum of offset 0 is 6" in out
    assert "Sum of offset 1 is 4" in out


def test_offset_sums_rejects_zero_workers():
    with pytest.raises(ValueError):
        offset_sums([1, 2, 3], 0)