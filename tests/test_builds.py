from __future__ import annotations

import pytest

from toolchain_version.builds import FINAL, RC, Development, Final, Milestone


def test_build_kinds_order_milestone_rc_final_development() -> None:
    assert Milestone(99) < RC(0)
    assert RC(99) < FINAL
    assert FINAL < Development("")
    assert Milestone(99) < Development("a")
    assert RC(99) < Development("a")


@pytest.mark.parametrize(
    "build",
    [Milestone(1), RC(1), FINAL, Development("nightly")],
)
def test_build_compares_equal_to_itself(build) -> None:
    assert build.compare(build) == 0
    assert build <= build and build >= build
    assert not (build < build)


def test_same_kind_numeric_builds_compare_by_number() -> None:
    assert Milestone(2) < Milestone(10)
    assert RC(3) > RC(1)
    assert RC(3).compare(RC(1)) == 2


def test_development_builds_compare_lexicographically() -> None:
    assert Development("abc") < Development("abd")
    assert Development("10") < Development("9")
    assert Development("x").compare(Development("y")) == -1
    assert Development("y").compare(Development("x")) == 1


def test_cross_kind_comparisons_agree_in_both_directions() -> None:
    builds = [Milestone(5), RC(5), FINAL, Development("z")]
    for i, a in enumerate(builds):
        for j, b in enumerate(builds):
            if i == j:
                continue
            assert (a.compare(b) < 0) == (i < j)
            assert (b.compare(a) < 0) == (j < i)


def test_numeric_build_difference_is_returned_unnormalised() -> None:
    # Known limitation: same-kind comparison is a plain subtraction of build numbers.
    big = 2**40
    assert RC(big).compare(RC(1)) == big - 1
    assert Milestone(0).compare(Milestone(big)) == -big


def test_unparse() -> None:
    assert FINAL.unparse() == ""
    assert RC(4).unparse() == "-RC4"
    assert Milestone(3).unparse() == "-M3"
    assert Development("devbuild").unparse() == "-devbuild"


def test_builds_are_immutable_values() -> None:
    assert Final() == FINAL
    assert hash(RC(1)) == hash(RC(1))
    assert RC(1) != Milestone(1)
    with pytest.raises(AttributeError):
        RC(1).n = 2  # type: ignore[misc]


def test_ordering_against_non_builds_is_a_type_error() -> None:
    with pytest.raises(TypeError):
        RC(1) < 1  # noqa: B015


def test_development_ids_order_by_utf16_code_unit() -> None:
    # U+1F600 is encoded as a surrogate pair starting at 0xD83D, below U+FFFD.
    assert Development("\U0001F600") < Development("\uFFFD")
    assert Development("a\U0001F600").compare(Development("a\uE000")) == -1
    assert Development("ab") > Development("a")
