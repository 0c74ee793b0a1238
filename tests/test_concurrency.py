"""Concurrent declaration and discovery against one enumeration."""

import sys
import threading
from concurrent.futures import ThreadPoolExecutor

from extensible_enums import ExtensibleEnum, register_case
from extensible_enums.discovery import case_entries
from extensible_enums.registry import CaseEntry, CaseTable


def test_parallel_registration_keeps_every_case():
    class Codes(ExtensibleEnum[int]):
        zero = 0

    def declare(i):
        register_case(Codes, f"code_{i:03d}", i)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(declare, range(1, 201)))

    assert Codes.count == 201
    assert Codes.value_for_name("code_150") == 150


def test_readers_see_growing_snapshots():
    class Ticks(ExtensibleEnum[int]):
        t000 = 0

    stop = threading.Event()
    counts = []
    errors = []

    def read():
        while not stop.is_set():
            keys = Ticks.all_keys()
            values = Ticks.all_values()
            if len(values) < len(keys):
                errors.append((keys, values))
            counts.append(len(keys))

    readers = [threading.Thread(target=read) for _ in range(4)]
    for reader in readers:
        reader.start()
    try:
        for i in range(1, 100):
            setattr(Ticks, f"t{i:03d}", i)
    finally:
        stop.set()
        for reader in readers:
            reader.join()

    assert not errors
    assert Ticks.count == 100
    assert all(1 <= count <= 100 for count in counts)


def test_racing_identical_declarations_register_once():
    table = CaseTable("Race")
    barrier = threading.Barrier(8)
    outcomes = []

    def add():
        barrier.wait()
        outcomes.append(table.add(CaseEntry(name="same", value=1)))

    threads = [threading.Thread(target=add) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count(True) == 1
    assert table.version == 1
    assert len(table) == 1


def test_lookup_during_registration_sees_the_new_case_afterwards():
    """A reader interleaved with every line of ``CaseTable.add`` never pins stale cases."""

    class Codes(ExtensibleEnum[int]):
        zero = 0

    add_code = CaseTable.add.__code__
    previous = sys.gettrace()

    def read_on_each_line(frame, event, arg):
        if event == "line":
            case_entries(Codes)
        return read_on_each_line

    def tracer(frame, event, arg):
        return read_on_each_line if frame.f_code is add_code else None

    sys.settrace(tracer)
    try:
        register_case(Codes, "one", 1)
    finally:
        sys.settrace(previous)

    assert [Codes.all_keys() for _ in range(3)] == [["one", "zero"]] * 3
    assert Codes.value_for_name("one") == 1
    assert "one" in Codes


def test_published_pair_is_consistent():
    table = CaseTable("Pairs")
    table.add(CaseEntry(name="one", value=1))
    version, entries = table.published()
    assert version == table.version == 1
    assert set(entries) == {"one"}
