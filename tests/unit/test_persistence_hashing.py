from blake3 import blake3

from persistence.hashing import FINGERPRINT_LENGTH, fingerprint


def test_fingerprint_is_deterministic() -> None:
    first = fingerprint("fpga1", "2024-05-01 12:00:00", b"build ok")
    second = fingerprint("fpga1", "2024-05-01 12:00:00", b"build ok")
    assert first == second
    assert len(first) == FINGERPRINT_LENGTH == 6
    assert all(ch in "0123456789abcdef" for ch in first)


def test_fingerprint_matches_blake3_of_concatenation() -> None:
    expected = blake3(b"fpga1" + b"2024-05-01 12:00:00" + b"build ok").hexdigest()[:6]
    assert fingerprint("fpga1", "2024-05-01 12:00:00", b"build ok") == expected


def test_fingerprint_known_value() -> None:
    assert fingerprint("fpga1", "2024-05-01 12:00:00", b"build ok") == "0af99c"


def test_fingerprint_accepts_text_log() -> None:
    assert fingerprint("p", "t", "naïve log") == fingerprint("p", "t", "naïve log".encode("utf-8"))


def test_fingerprint_depends_on_every_input() -> None:
    base = fingerprint("fpga1", "2024-05-01 12:00:00", b"build ok")
    assert fingerprint("fpga2", "2024-05-01 12:00:00", b"build ok") != base
    assert fingerprint("fpga1", "2024-05-01 12:00:01", b"build ok") != base
    assert fingerprint("fpga1", "2024-05-01 12:00:00", b"build failed") != base
