import threading

import pytest
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

from securepassgen import entropy
from securepassgen.entropy import EntropySource, default_source, POOL_SIZE
from securepassgen.exceptions import EntropySourceFailure

from conftest import SEED


def _chacha20_keystream(seed, n):
    enc = Cipher(algorithms.ChaCha20(seed, bytes(16)), mode=None).encryptor()
    return enc.update(bytes(n))


def test_stream_is_chacha20_keystream():
    src = EntropySource(SEED)
    buf = bytearray(3 * POOL_SIZE + 7)
    src.fill(buf)
    assert bytes(buf) == _chacha20_keystream(SEED, len(buf))


def test_same_seed_same_stream():
    a = EntropySource(SEED)
    b = EntropySource(SEED)
    assert [a.next_byte() for _ in range(50)] == [b.next_byte() for _ in range(50)]


def test_different_seeds_differ():
    a = EntropySource(SEED)
    b = EntropySource(bytes(32))
    assert [a.next_byte() for _ in range(32)] != [b.next_byte() for _ in range(32)]


def test_draw_methods_share_one_stream():
    a = EntropySource(SEED)
    b = EntropySource(SEED)
    first = bytearray(POOL_SIZE + 10)
    a.fill(first)
    assert list(first) == [b.next_byte() for _ in range(len(first))]

    raw = bytearray(4)
    a.fill(raw)
    assert b.next_u32() == int.from_bytes(raw, "little")


def test_positions_never_reused():
    src = EntropySource(SEED)
    one = bytearray(64)
    two = bytearray(64)
    src.fill(one)
    src.fill(two)
    assert one != two


def test_consumed_pool_bytes_are_wiped():
    src = EntropySource(SEED)
    for _ in range(10):
        src.next_byte()
    assert src._pool[:10] == bytearray(10)


def test_next_u32_range():
    src = EntropySource(SEED)
    for _ in range(100):
        v = src.next_u32()
        assert 0 <= v < 2 ** 32


def test_unseeded_sources_differ():
    a = EntropySource()
    b = EntropySource()
    assert a.next_u32() != b.next_u32() or a.next_u32() != b.next_u32()


def test_bad_seed_length():
    with pytest.raises(ValueError):
        EntropySource(b"short")


def test_os_failure_is_fatal(monkeypatch):
    def broken(n):
        raise OSError("no entropy")

    monkeypatch.setattr(entropy.os, "urandom", broken)
    with pytest.raises(EntropySourceFailure):
        EntropySource()


def test_default_source_is_shared(monkeypatch):
    monkeypatch.setattr(entropy, "_default", None)
    assert default_source() is default_source()


def test_concurrent_draws_do_not_overlap():
    shared = EntropySource(SEED)
    results = []
    lock = threading.Lock()

    def worker():
        got = [shared.next_byte() for _ in range(1000)]
        with lock:
            results.extend(got)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    expected = _chacha20_keystream(SEED, 4000)
    assert sorted(results) == sorted(expected)
