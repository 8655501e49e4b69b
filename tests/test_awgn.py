from itertools import islice

from sipmedia.awgn import AWGN

EXPECTED = [64, -28, 1, 34, -73]


def test_awgn_samples():
    awgn = AWGN(-50.0)
    assert [awgn.get() for _ in range(5)] == EXPECTED


def test_iteration_matches_get():
    assert list(islice(AWGN(-50.0), 5)) == EXPECTED


def test_from_dbm0_with_default_seed_matches_constructor():
    a = AWGN(-45.0)
    b = AWGN.from_dbm0(7162534, -45.0)
    assert [a.get() for _ in range(50)] == [b.get() for _ in range(50)]


def test_negative_seed_equals_positive_seed():
    a = AWGN.from_dbov(-12345, -40.0)
    b = AWGN.from_dbov(12345, -40.0)
    assert list(islice(a, 30)) == list(islice(b, 30))


def test_deterministic():
    for _ in range(3):
        assert list(islice(AWGN(-50.0), 5)) == EXPECTED


def test_samples_are_int16():
    samples = list(islice(AWGN(0.0), 1000))
    assert all(-32768 <= s <= 32767 for s in samples)


def test_louder_is_louder():
    quiet = list(islice(AWGN(-60.0), 500))
    loud = list(islice(AWGN(-20.0), 500))
    assert sum(abs(s) for s in loud) > sum(abs(s) for s in quiet)


def test_very_loud_saturates():
    samples = list(islice(AWGN.from_dbov(1, 40.0), 200))
    assert 32767 in samples or -32768 in samples