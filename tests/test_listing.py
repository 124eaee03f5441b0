import pytest

from sskv.codec import encode_value
from sskv.keys import into_key
from sskv.listing import KvListBuilder
from sskv.memory import MemoryBackend


@pytest.fixture
def backend():
    store = MemoryBackend()
    for name in ("a", "b"):
        for n in (1, 2, 10):
            store.set(into_key((name, n)), encode_value(f"{name}{n}"))
    return store


def test_no_filter_lists_everything_sorted(backend):
    pairs = list(KvListBuilder(backend))
    keys = [k for k, _ in pairs]
    assert keys == sorted(keys)
    assert len(pairs) == 6


def test_prefix_filters_and_orders_numerically(backend):
    values = [v for _, v in KvListBuilder(backend).prefix(("a",))]
    assert values == ["a1", "a2", "a10"]


def test_start_and_end_are_inclusive(backend):
    values = [v for _, v in KvListBuilder(backend).start(("a", 2)).end(("b", 2))]
    assert values == ["a2", "a10", "b1", "b2"]


def test_prefix_combined_with_start(backend):
    values = [v for _, v in KvListBuilder(backend).prefix(("b",)).start(("b", 2))]
    assert values == ["b2", "b10"]


def test_keys_returned_match_stored(backend):
    keys = [k for k, _ in KvListBuilder(backend).prefix(("b",))]
    assert keys == [into_key(("b", n)) for n in (1, 2, 10)]


def test_no_match_yields_nothing(backend):
    assert list(KvListBuilder(backend).prefix(("zzz",))) == []


def test_undecodable_values_are_skipped(backend):
    backend.set(into_key(("a", 5)), b"\xff\xff")
    values = [v for _, v in KvListBuilder(backend).prefix(("a",))]
    assert values == ["a1", "a2", "a10"]


def test_builder_methods_chain():
    builder = KvListBuilder(MemoryBackend())
    assert builder.prefix(("x",)) is builder
    assert builder.start(("x", 1)) is builder
    assert builder.end(("x", 9)) is builder