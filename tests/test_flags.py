import pytest

from vgengine.flags import (
    all_flags,
    diff_flags,
    diff_flags_in_0,
    diff_flags_in_1,
    flags_all_are_set,
    flags_all_are_unset,
    get_flags,
    set_flags,
    toggle_flags,
    unset_flags,
)

A = 1 << 0
B = 1 << 1
C = 1 << 2


def test_set_then_get():
    flags = set_flags(0, A | B)
    assert get_flags(flags, A) == A
    assert get_flags(flags, B | C) == B
    assert get_flags(flags, C) == 0


def test_unset_removes_only_given_flags():
    assert unset_flags(A | B, A) == B
    assert unset_flags(A | B | C, A | C) == B
    assert unset_flags(B, A) == B


def test_toggle_twice_restores():
    for flags in range(16):
        assert toggle_flags(toggle_flags(flags, A | C), A | C) == flags
    assert toggle_flags(A, A | B) == B


def test_diff_flags():
    assert diff_flags(A | B, B | C) == A | C
    assert diff_flags(A, A) == 0


def test_diff_in_1_reports_cleared_flags():
    assert diff_flags_in_1(A, A | B) == B
    assert diff_flags_in_1(A | B, A) == 0


def test_diff_in_0_reports_newly_set_flags():
    assert diff_flags_in_0(A | B, A) == B
    assert diff_flags_in_0(A, A | B) == 0


def test_diffs_partition_the_difference():
    for new in range(8):
        for old in range(8):
            cleared = diff_flags_in_1(new, old)
            added = diff_flags_in_0(new, old)
            assert cleared & added == 0
            assert cleared | added == diff_flags(new, old)


def test_all_flags_match_word_maxima():
    assert all_flags(8) == 255
    assert all_flags(16) == 65535
    assert all_flags(32) == 4294967295
    assert all_flags(64) == 18446744073709551615


def test_all_flags_rejects_empty_word():
    with pytest.raises(ValueError):
        all_flags(0)


def test_flags_all_are_set():
    assert flags_all_are_set(all_flags(8))
    assert not flags_all_are_set(all_flags(8) - 1)
    assert flags_all_are_set(all_flags(16), 16)
    assert not flags_all_are_set(all_flags(8), 16)


def test_flags_all_are_unset():
    assert flags_all_are_unset(0)
    assert not flags_all_are_unset(A)