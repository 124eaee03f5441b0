from sskv.keys import into_key
from sskv.memory import MemoryBackend


def test_memory_backend_insert_get_delete():
    backend = MemoryBackend()
    k = into_key(("foo",))
    backend.set(k, bytes([1, 2, 3]))
    assert backend.get(k) == bytes([1, 2, 3])
    backend.delete(k)
    assert backend.get(k) is None


def test_set_replaces_value():
    backend = MemoryBackend()
    k = into_key(("a",))
    backend.set(k, b"one")
    backend.set(k, b"two")
    assert backend.get(k) == b"two"
    assert list(backend.keys()) == [k]


def test_delete_missing_key_is_silent():
    backend = MemoryBackend()
    backend.delete(into_key(("no_such_key",)))
    assert backend.get(into_key(("no_such_key",))) is None


def test_clear_removes_everything():
    backend = MemoryBackend()
    backend.set(into_key(("a",)), b"1")
    backend.set(into_key(("b",)), b"2")
    backend.clear()
    assert list(backend.keys()) == []
    assert backend.get(into_key(("a",))) is None


def test_stored_value_is_a_copy():
    backend = MemoryBackend()
    k = into_key(("buf",))
    buffer = bytearray(b"abc")
    backend.set(k, buffer)
    buffer[0] = ord("z")
    assert backend.get(k) == b"abc"


def test_get_many_returns_only_present_keys():
    backend = MemoryBackend()
    ka, kb, kc = into_key(("a",)), into_key(("b",)), into_key(("c",))
    backend.set(ka, b"1")
    backend.set(kb, b"2")
    result = sorted(backend.get_many([ka, kc, kb]))
    assert result == [b"1", b"2"]


def test_keys_are_a_snapshot():
    backend = MemoryBackend()
    k1, k2, k3 = into_key(("1",)), into_key(("2",)), into_key(("3",))
    for key, value in zip((k1, k2, k3), (b"\x0a", b"\x0b", b"\x0c")):
        backend.set(key, value)
    snapshot = backend.keys()
    backend.delete(k2)
    assert sorted(snapshot) == [k1, k2, k3]
    assert sorted(backend.keys()) == [k1, k3]