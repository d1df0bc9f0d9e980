# tests/test_concurrency.py
"""
tests/test_concurrency.py
-------------------------

Concurrent use of one engine: readers never see torn state while other
threads reconfigure it, and clones stay independent under load.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from engines import api

ROUNDS = 200


def test_concurrent_reads_and_writes(engine) -> None:
    engine.def_noun("foo", "fooz")

    def writer(i: int) -> None:
        for _ in range(ROUNDS):
            engine.def_noun("foo", "fooi" if i % 2 else "fooz")
            engine.classical_ancient(True)
            engine.classical_ancient(False)
            engine.def_an_pattern("ban.*")
            engine.undef_an_pattern("ban.*")

    def reader(_: int) -> set:
        seen = set()
        for _ in range(ROUNDS):
            seen.add(engine.plural("foo"))
            assert engine.plural("child") == "children"
            assert engine.an("hour") == "an hour"
            assert engine.plural("formula") in ("formulas", "formulae")
            assert engine.an("banana") in ("a banana", "an banana")
        return seen

    with ThreadPoolExecutor(max_workers=8) as pool:
        writers = [pool.submit(writer, i) for i in range(2)]
        readers = [pool.submit(reader, i) for i in range(6)]
        for future in writers:
            future.result()
        results = [future.result() for future in readers]

    for seen in results:
        assert seen <= {"fooz", "fooi"}


def test_clone_under_concurrent_writes(engine) -> None:
    def writer(i: int) -> None:
        for n in range(ROUNDS):
            engine.def_noun(f"word{i}x{n}", f"word{i}x{n}z")

    def cloner(_: int) -> int:
        sizes = 0
        for _ in range(ROUNDS // 10):
            copy = engine.clone()
            copy.def_noun("private", "privatez")
            sizes += len(copy._irregular)
        return sizes

    with ThreadPoolExecutor(max_workers=6) as pool:
        futures = [pool.submit(writer, i) for i in range(3)]
        futures += [pool.submit(cloner, i) for i in range(3)]
        for future in futures:
            future.result()

    assert engine.plural("private") == "privates"
    assert engine.plural("word0x0") == "word0x0z"


def test_default_engine_shared_across_threads(default_engine) -> None:
    def work(i: int) -> str:
        return api.plural("child") + api.an("hour") + api.ordinal(i)

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(work, range(1, 5)))

    assert results == [
        "childrenan hour1st",
        "childrenan hour2nd",
        "childrenan hour3rd",
        "childrenan hour4th",
    ]
