from datetime import timedelta

import pytest

from reqkit.timeout import Timeout


def test_int_milliseconds():
    assert Timeout(1).milliseconds() == 1


def test_timedelta_milliseconds():
    assert Timeout(timedelta(milliseconds=250)).milliseconds() == 250


def test_timedelta_and_int_agree():
    assert Timeout(timedelta(seconds=2)) == Timeout(2000)


def test_upper_boundary_accepted():
    assert Timeout(2**63 - 1).milliseconds() == 2**63 - 1


def test_lower_boundary_accepted():
    assert Timeout(-(2**63)).milliseconds() == -(2**63)


def test_overflow_raises():
    with pytest.raises(OverflowError, match="overflow"):
        Timeout(2**63).milliseconds()


def test_underflow_raises():
    with pytest.raises(OverflowError, match="underflow"):
        Timeout(-(2**63) - 1).milliseconds()


@pytest.mark.parametrize("bad", ["100", 1.5, True, None])
def test_rejects_other_types(bad):
    with pytest.raises(TypeError):
        Timeout(bad)