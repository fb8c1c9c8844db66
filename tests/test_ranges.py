from range_algebra.ranges import Range, intersect


def test_equality_and_ordering():
    assert Range(1, 5) == Range(1, 5)
    assert Range(1, 5) != Range(1, 6)
    assert Range(-5, 5) < Range(0, 10)
    assert Range(-5, 5) < Range(-4, 10)
    assert Range(-5, 5) < Range(-5, 10)
    assert not Range(-5, 5) < Range(-5, 5)
    assert not Range(-5, 5) < Range(-10, 10)
    assert not Range(-5, 5) < Range(-5, 2)
    assert Range() == Range(0, 0)
    assert len({Range(1, 5), Range(1, 5), Range(1, 6)}) == 2


def test_validity_predicates():
    assert Range(-9, -9).empty()
    assert Range(2, 2).empty()
    assert not Range(4, 9).empty()
    assert not Range(4, -9).empty()

    assert Range(-9, 10).valid()
    assert Range(0, 0).valid()
    assert not Range(0, -1).valid()

    assert Range(0, 1).non_empty()
    assert not Range(0, 0).non_empty()
    assert not Range(1, 0).non_empty()
    assert Range().valid() and Range().empty()


def test_point_containment_is_right_open():
    r = Range(-5, 5)
    assert 0 in r
    assert -5 in r
    assert -6 not in r
    assert 5 not in r
    assert 10 not in r
    assert Range(0.5, 1.5).contains(1.25)


def test_range_containment():
    r = Range(-5, 5)
    assert Range(0, 1) in r
    assert Range(0, 5) in r
    assert Range(-5, 2) in r
    assert Range(-5, 5) in r
    assert Range(-10, 0) not in r
    assert Range(-5, 6) not in r
    assert Range(-10, -5) not in r
    assert Range(-5, -9) not in r
    assert Range(-6, 5) not in r
    assert Range(-10, 15) not in r
    # empty and invalid ranges are never contained
    assert Range(0, 0) not in r
    assert not Range(5, -5).contains(Range(2, 5))
    assert not Range(5, -5).contains(Range(2, -5))


def test_intersect():
    r = Range(1, 8)
    assert r.intersect(Range(5, 12)) == Range(5, 8)
    assert Range(5, 12).intersect(r) == Range(5, 8)
    assert r.intersect(Range(1, 10)) == Range(1, 8)
    assert r.intersect(Range(8, 12)).empty()
    assert intersect(r, Range(9, 12)).empty()
    assert intersect(r, Range(-9, -1)).empty()
    assert intersect(r, Range(-9, 1)).empty()
    assert not intersect(r, Range(-9, 2)).empty()
    # disjoint intersection is the empty range at the clamped start
    assert intersect(r, Range(9, 12)) == Range(9, 9)
    assert intersect(r, Range(-9, -1)) == Range(1, 1)
    # operands are untouched
    assert r == Range(1, 8)


def test_union():
    r = Range(1, 5)
    r += Range(4, 10)
    assert r == Range(1, 10)
    assert Range(1, 5) + Range(1, 7) == Range(1, 7)
    assert Range(1, 5) + Range(-1, 2) == Range(-1, 5)
    assert Range(1, 5) + Range(-1, 10) == Range(-1, 10)
    assert Range(1, 5) + Range(2, 3) == Range(1, 5)
    # touching ranges join
    assert Range(1, 5) + Range(5, 7) == Range(1, 7)
    assert (Range(5, 7) + Range(-11, 5)).valid()


def test_union_of_disjoint_ranges_is_invalid():
    assert not (Range(1, 5) + Range(6, 7)).valid()
    assert Range(1, 5) + Range(6, 7) == Range(5, 1)
    assert not (Range(-5, -1) + Range(6, 7)).valid()
    assert Range(1, 5).union(Range(6, 7)) is None
    assert Range(1, 5).union(Range(5, 7)) == Range(1, 7)


def test_union_with_invalid_operand_takes_the_other_one():
    assert Range(11, 5) + Range(5, 7) == Range(5, 7)
    assert Range(1, 5) + Range(9, 7) == Range(1, 5)
    assert Range(5, 7) + Range(11, 5) == Range(5, 7)
    assert not (Range(11, 5) + Range(9, 7)).valid()


def test_union_with_empty_disjoint_receiver_returns_other():
    assert Range(0, 0) + Range(3, 6) == Range(3, 6)
    assert Range(9, 9) + Range(3, 6) == Range(3, 6)
    # an empty other operand does not get the same treatment
    assert not (Range(3, 6) + Range(9, 9)).valid()


def test_union_covers_both_operands():
    a = Range(0, 6)
    b = Range(4, 9)
    u = a + b
    assert u.valid()
    for x in range(-2, 12):
        if x in a or x in b:
            assert x in u


def test_difference():
    r = Range(1, 10)
    r -= Range(4, 10)
    assert r == Range(1, 4)
    assert Range(1, 5) - Range(3, 7) == Range(1, 3)
    assert Range(1, 5) - Range(-1, 2) == Range(2, 5)
    assert Range(1, 5) - Range(7, 10) == Range(1, 5)
    assert Range(1, 5) - Range(5, 13) == Range(1, 5)
    assert (Range(5, 7) - Range(-11, 5)).valid()
    assert (Range(-5, -1) - Range(-1, 7)).valid()
    assert (Range(-5, -1) - Range(-10, 7)).valid()
    assert (Range(-5, -1) - Range(-10, 7)).empty()
    assert Range(-5, -1) - Range(-10, 7) == Range(-5, -5)


def test_difference_that_would_split_is_invalid():
    assert not (Range(1, 15) - Range(4, 7)).valid()
    assert Range(1, 15) - Range(4, 7) == Range(15, 1)
    assert Range(1, 15).difference(Range(4, 7)) is None
    assert Range(1, 15).difference(Range(4, 15)) == Range(1, 4)


def test_difference_with_invalid_operand_takes_the_other_one():
    assert Range(11, 5) - Range(5, 7) == Range(5, 7)
    assert Range(1, 5) - Range(9, 7) == Range(1, 5)


def test_operators_reject_foreign_operands():
    r = Range(1, 5)
    for bad in (1, (1, 5), "x"):
        try:
            r + bad
        except TypeError:
            pass
        else:
            raise AssertionError(f"Range + {bad!r} should raise TypeError")


def test_float_bounds_and_length():
    r = Range(0.5, 2.0)
    assert r.length() == 1.5
    assert (r + Range(2.0, 3.25)) == Range(0.5, 3.25)
    assert r.as_tuple() == (0.5, 2.0)
