"""
Тесты для OrderingComparer

Покрывает:
- of_compare и нормализацию знака
- Канонические NUMBER / STRING / DATE / DEFAULT
- reverse, derive_from, get_composite
- gt / geq / lt / leq, is_between
- derive_equality_comparer
- minimum / maximum / clamp, float_with_tolerance
- Законы порядка (рефлексивность, антисимметричность) для производных comparers
"""

from dataclasses import dataclass
from datetime import date

import pytest

from fptoolkit.core.comparers import equality_comparer, ordering_comparer
from fptoolkit.core.comparers.equality_comparer import EqualityComparer
from fptoolkit.core.comparers.ordering_comparer import OrderingComparer
from fptoolkit.core.math.numerical_safeguards import sign

NAN = float("nan")
INF = float("inf")

SHUFFLED_NUMBERS = [-11, -13, 2, 0, 45, 1, 8, 2, 100, -1]


@dataclass(frozen=True)
class Person:
    name: str


@dataclass(frozen=True)
class Cat:
    name: str
    age: int
    lives_remaining: int


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def by_name() -> OrderingComparer[Cat]:
    return ordering_comparer.derive_from(ordering_comparer.STRING, lambda c: c.name)


@pytest.fixture
def by_age() -> OrderingComparer[Cat]:
    return ordering_comparer.derive_from(ordering_comparer.NUMBER, lambda c: c.age)


@pytest.fixture
def by_lives_remaining_desc() -> OrderingComparer[Cat]:
    return ordering_comparer.derive_from(
        ordering_comparer.reverse(ordering_comparer.NUMBER),
        lambda c: c.lives_remaining,
    )


@pytest.fixture
def shuffled_cats() -> list[Cat]:
    return [
        Cat("Gerald", 5, 9),
        Cat("Rufus", 10, 3),
        Cat("Gerald", 5, 7),
        Cat("Arnold", 1, 9),
        Cat("Rufus", 10, 1),
        Cat("Gerald", 7, 8),
    ]


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestOfCompare:
    """Тесты для of_compare"""

    def test_constructs_from_compare_function(self) -> None:
        """Числа по убыванию через рукописную функцию"""
        compare = ordering_comparer.of_compare(
            lambda n1, n2: 0 if n1 == n2 else (-1 if n1 > n2 else 1)
        ).compare
        assert compare(5, 5) == 0
        assert compare(6, 5) == -1
        assert compare(5, 6) == 1
        assert compare(100, 0) == -1
        assert compare(0, 100) == 1

    def test_normalizes_magnitude_to_sign(self) -> None:
        """Значим только знак результата"""
        compare = ordering_comparer.of_compare(lambda a, b: a - b).compare
        assert compare(100, 1) == 1
        assert compare(1, 100) == -1
        assert compare(2.5, 2.5) == 0
        assert compare(1.5, 1.25) == 1

    def test_direct_construction_is_normalized(self) -> None:
        comparer = OrderingComparer(lambda a, b: a - b)
        assert comparer.compare(1, 5) == -1
        assert comparer.compare(9, 5) == 1
        assert ordering_comparer.reverse(comparer).compare(1, 5) == 1
        assert ordering_comparer.get_composite(comparer).compare(10, 1) == 1
        assert ordering_comparer.derive_from(comparer, len).compare("abcd", "a") == 1

    def test_key_plugs_into_sorted(self) -> None:
        comparer = ordering_comparer.of_compare(lambda a, b: a - b)
        assert sorted(SHUFFLED_NUMBERS, key=comparer.key()) == sorted(SHUFFLED_NUMBERS)


# =============================================================================
# КАНОНИЧЕСКИЕ ЭКЗЕМПЛЯРЫ
# =============================================================================


class TestNumber:
    """Тесты для NUMBER"""

    def test_sorts_numbers_ascending(self) -> None:
        result = sorted(SHUFFLED_NUMBERS, key=ordering_comparer.NUMBER.key())
        assert result == [-13, -11, -1, 0, 1, 2, 2, 8, 45, 100]

    def test_compare_values(self) -> None:
        assert ordering_comparer.NUMBER.compare(1, 2) == -1
        assert ordering_comparer.NUMBER.compare(2, 1) == 1
        assert ordering_comparer.NUMBER.compare(2, 2.0) == 0

    def test_nan_sorts_last(self) -> None:
        result = sorted([2.0, NAN, -1.0, INF], key=ordering_comparer.NUMBER.key())
        assert result[:3] == [-1.0, 2.0, INF]
        assert result[3] != result[3]

    def test_nan_laws(self) -> None:
        compare = ordering_comparer.NUMBER.compare
        assert compare(NAN, NAN) == 0
        assert compare(NAN, 5.0) == -compare(5.0, NAN) == 1

    def test_derived_equality_agrees_with_number_equality(self) -> None:
        derived = ordering_comparer.derive_equality_comparer(ordering_comparer.NUMBER)
        for a in [NAN, 5.0, -INF]:
            for b in [NAN, 5.0, -INF]:
                assert derived.equals(a, b) == equality_comparer.NUMBER.equals(a, b)


class TestString:
    """Тесты для STRING"""

    def test_sorts_lexicographically(self) -> None:
        names = ["Larry", "amy", "Amy", "Kevin"]
        assert sorted(names, key=ordering_comparer.STRING.key()) == [
            "Amy",
            "Kevin",
            "Larry",
            "amy",
        ]


class TestDate:
    """Тесты для DATE"""

    def test_sorts_dates_ascending(self) -> None:
        dates = [date(2023, 3, 15), date(2025, 3, 15), date(2022, 3, 15), date(2020, 3, 15)]
        assert sorted(dates, key=ordering_comparer.DATE.key()) == [
            date(2020, 3, 15),
            date(2022, 3, 15),
            date(2023, 3, 15),
            date(2025, 3, 15),
        ]


class TestDefault:
    """Тесты для DEFAULT"""

    def test_native_ordering(self) -> None:
        assert ordering_comparer.DEFAULT.compare("a", "b") == -1
        assert ordering_comparer.DEFAULT.compare((1, 2), (1, 1)) == 1
        assert ordering_comparer.DEFAULT.compare(3, 3) == 0


# =============================================================================
# КОМБИНАТОРЫ
# =============================================================================


class TestReverse:
    """Тесты для reverse"""

    def test_reverses_sort_order(self) -> None:
        reversed_number = ordering_comparer.reverse(ordering_comparer.NUMBER)
        result = sorted(SHUFFLED_NUMBERS, key=reversed_number.key())
        assert result == [100, 45, 8, 2, 2, 1, 0, -1, -11, -13]

    @pytest.mark.parametrize("a, b", [(1, 2), (2, 1), (3, 3), (0, 0), (-5, 5)])
    def test_negates_compare(self, a: int, b: int) -> None:
        reversed_number = ordering_comparer.reverse(ordering_comparer.NUMBER)
        assert reversed_number.compare(a, b) == -ordering_comparer.NUMBER.compare(a, b)

    def test_zero_stays_zero(self) -> None:
        reversed_number = ordering_comparer.reverse(ordering_comparer.NUMBER)
        assert reversed_number.compare(7, 7) == 0

    def test_double_reverse_is_identity(self) -> None:
        twice = ordering_comparer.reverse(ordering_comparer.reverse(ordering_comparer.NUMBER))
        for a in SHUFFLED_NUMBERS:
            for b in SHUFFLED_NUMBERS:
                assert twice.compare(a, b) == ordering_comparer.NUMBER.compare(a, b)


class TestDeriveFrom:
    """Тесты для derive_from"""

    def test_sorts_records_by_field(self) -> None:
        by_person_name = ordering_comparer.derive_from(ordering_comparer.STRING, lambda p: p.name)
        people = [Person("Johnny"), Person("Larry"), Person("Amy"), Person("Kevin")]
        assert sorted(people, key=by_person_name.key()) == [
            Person("Amy"),
            Person("Johnny"),
            Person("Kevin"),
            Person("Larry"),
        ]

    def test_delegates_to_inner_on_keys(self, shuffled_cats: list[Cat]) -> None:
        by_age = ordering_comparer.derive_from(ordering_comparer.NUMBER, lambda c: c.age)
        for a in shuffled_cats:
            for b in shuffled_cats:
                assert by_age.compare(a, b) == ordering_comparer.NUMBER.compare(a.age, b.age)


class TestGetComposite:
    """Тесты для get_composite"""

    def test_and_then_by(
        self,
        by_name: OrderingComparer[Cat],
        by_age: OrderingComparer[Cat],
        by_lives_remaining_desc: OrderingComparer[Cat],
        shuffled_cats: list[Cat],
    ) -> None:
        """Имя, затем возраст, затем оставшиеся жизни по убыванию"""
        composite = ordering_comparer.get_composite(by_name, by_age, by_lives_remaining_desc)

        assert sorted(shuffled_cats, key=composite.key()) == [
            Cat("Arnold", 1, 9),
            Cat("Gerald", 5, 9),
            Cat("Gerald", 5, 7),
            Cat("Gerald", 7, 8),
            Cat("Rufus", 10, 3),
            Cat("Rufus", 10, 1),
        ]

    def test_argument_order_defines_priority(
        self,
        by_name: OrderingComparer[Cat],
        by_age: OrderingComparer[Cat],
    ) -> None:
        young_rufus = Cat("Rufus", 1, 9)
        old_arnold = Cat("Arnold", 10, 9)
        assert ordering_comparer.get_composite(by_name, by_age).compare(young_rufus, old_arnold) == 1
        assert ordering_comparer.get_composite(by_age, by_name).compare(young_rufus, old_arnold) == -1

    def test_ties_remain_ties(self, by_name: OrderingComparer[Cat]) -> None:
        """Неполная цепочка tie-break не является ошибкой"""
        composite = ordering_comparer.get_composite(by_name)
        assert composite.compare(Cat("Gerald", 5, 9), Cat("Gerald", 7, 8)) == 0

    def test_no_comparers_always_tie(self) -> None:
        composite = ordering_comparer.get_composite()
        assert composite.compare(1, 2) == 0
        assert composite.compare("b", "a") == 0

    def test_stops_at_first_nonzero(self, by_name: OrderingComparer[Cat]) -> None:
        calls: list[tuple] = []

        def tracking(a: Cat, b: Cat) -> int:
            calls.append((a, b))
            return 0

        composite = ordering_comparer.get_composite(
            by_name, ordering_comparer.of_compare(tracking)
        )
        assert composite.compare(Cat("Arnold", 1, 9), Cat("Rufus", 1, 9)) == -1
        assert calls == []


class TestDeriveEqualityComparer:
    """Тесты для derive_equality_comparer"""

    def test_equal_when_compare_is_zero(self) -> None:
        ec = ordering_comparer.derive_equality_comparer(ordering_comparer.NUMBER)
        assert isinstance(ec, EqualityComparer)
        assert ec.equals(1, 1)
        assert not ec.equals(1, 2)
        assert not ec.equals(2, 1)

    def test_follows_derived_order(self, by_name: OrderingComparer[Cat]) -> None:
        ec = ordering_comparer.derive_equality_comparer(by_name)
        assert ec.equals(Cat("Gerald", 5, 9), Cat("Gerald", 7, 8))
        assert not ec.equals(Cat("Gerald", 5, 9), Cat("Rufus", 5, 9))


# =============================================================================
# ОТНОШЕНИЯ
# =============================================================================


class TestRelations:
    """Тесты для gt / geq / lt / leq"""

    @pytest.mark.parametrize(
        "expected, first, second",
        [(True, 2, 1), (False, 1, 1), (False, 0, 1)],
        ids=["a > b", "a = b", "a < b"],
    )
    def test_gt(self, expected: bool, first: int, second: int) -> None:
        assert ordering_comparer.gt(ordering_comparer.NUMBER)(first, second) is expected

    @pytest.mark.parametrize(
        "expected, first, second",
        [(True, 2, 1), (True, 1, 1), (False, 0, 1)],
        ids=["a > b", "a = b", "a < b"],
    )
    def test_geq(self, expected: bool, first: int, second: int) -> None:
        assert ordering_comparer.geq(ordering_comparer.NUMBER)(first, second) is expected

    @pytest.mark.parametrize(
        "expected, first, second",
        [(False, 2, 1), (False, 1, 1), (True, 0, 1)],
        ids=["a > b", "a = b", "a < b"],
    )
    def test_lt(self, expected: bool, first: int, second: int) -> None:
        assert ordering_comparer.lt(ordering_comparer.NUMBER)(first, second) is expected

    @pytest.mark.parametrize(
        "expected, first, second",
        [(False, 2, 1), (True, 1, 1), (True, 0, 1)],
        ids=["a > b", "a = b", "a < b"],
    )
    def test_leq(self, expected: bool, first: int, second: int) -> None:
        assert ordering_comparer.leq(ordering_comparer.NUMBER)(first, second) is expected

    def test_relations_follow_reversed_order(self) -> None:
        desc = ordering_comparer.reverse(ordering_comparer.NUMBER)
        assert ordering_comparer.gt(desc)(1, 2)
        assert ordering_comparer.lt(desc)(2, 1)


class TestIsBetween:
    """Тесты для is_between"""

    @pytest.mark.parametrize(
        "expected, test",
        [(True, 5), (True, 1), (True, 3), (False, 6), (False, 0)],
        ids=["on upper bound", "on lower bound", "within bounds", "above upper", "below lower"],
    )
    def test_numbers(self, expected: bool, test: int) -> None:
        assert ordering_comparer.is_between(ordering_comparer.NUMBER)(1, 5)(test) is expected

    def test_dates(self) -> None:
        in_2023 = ordering_comparer.is_between(ordering_comparer.DATE)(
            date(2023, 1, 1), date(2023, 12, 31)
        )
        assert in_2023(date(2023, 6, 15))
        assert not in_2023(date(2024, 1, 1))

    def test_strings(self) -> None:
        b_to_d = ordering_comparer.is_between(ordering_comparer.STRING)("b", "d")
        assert b_to_d("cheese")
        assert not b_to_d("egg")

    def test_empty_range_when_bounds_inverted(self) -> None:
        assert not ordering_comparer.is_between(ordering_comparer.NUMBER)(5, 1)(3)


class TestMinimumMaximum:
    """Тесты для minimum / maximum"""

    def test_minimum(self) -> None:
        assert ordering_comparer.minimum(ordering_comparer.NUMBER)(3, 1) == 1
        assert ordering_comparer.minimum(ordering_comparer.NUMBER)(1, 3) == 1

    def test_maximum(self) -> None:
        assert ordering_comparer.maximum(ordering_comparer.NUMBER)(3, 1) == 3
        assert ordering_comparer.maximum(ordering_comparer.NUMBER)(1, 3) == 3

    def test_first_argument_wins_ties(self, by_name: OrderingComparer[Cat]) -> None:
        young = Cat("Gerald", 5, 9)
        old = Cat("Gerald", 7, 8)
        assert ordering_comparer.minimum(by_name)(young, old) is young
        assert ordering_comparer.maximum(by_name)(old, young) is old


class TestClamp:
    """Тесты для clamp"""

    @pytest.mark.parametrize("value, expected", [(-1, 0), (0, 0), (5, 5), (10, 10), (15, 10)])
    def test_numbers(self, value: int, expected: int) -> None:
        assert ordering_comparer.clamp(ordering_comparer.NUMBER)(0, 10)(value) == expected

    def test_strings(self) -> None:
        clamp_letters = ordering_comparer.clamp(ordering_comparer.STRING)("b", "d")
        assert clamp_letters("a") == "b"
        assert clamp_letters("z") == "d"
        assert clamp_letters("c") == "c"

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError, match="lower bound 10 must be <= upper bound 0"):
            ordering_comparer.clamp(ordering_comparer.NUMBER)(10, 0)


class TestFloatWithTolerance:
    """Тесты для float_with_tolerance"""

    def test_values_within_tolerance_tie(self) -> None:
        comparer = ordering_comparer.float_with_tolerance(tol=1e-6)
        assert comparer.compare(1.0, 1.0 + 1e-9) == 0
        assert comparer.compare(1.0, 1.1) == -1
        assert comparer.compare(1.1, 1.0) == 1

    def test_negative_tolerance_raises(self) -> None:
        with pytest.raises(ValueError, match="tol must be non-negative"):
            ordering_comparer.float_with_tolerance(tol=-0.1)

    def test_nan_is_reflexive(self) -> None:
        assert ordering_comparer.float_with_tolerance().compare(NAN, float("nan")) == 0

    def test_nan_is_antisymmetric(self) -> None:
        compare = ordering_comparer.float_with_tolerance(tol=1e-6).compare
        for value in [1.0, -INF, INF, 0.0]:
            assert compare(NAN, value) == -compare(value, NAN) == 1

    def test_sorts_nan_last(self) -> None:
        comparer = ordering_comparer.float_with_tolerance()
        result = sorted([NAN, 3.0, -INF, NAN, 1.0], key=comparer.key())
        assert result[:3] == [-INF, 1.0, 3.0]
        assert all(value != value for value in result[3:])


# =============================================================================
# ЗАКОНЫ ПОРЯДКА
# =============================================================================


class TestOrderLaws:
    """Законы порядка сохраняются производными comparers"""

    def _comparers(self, by_name, by_age, by_lives_remaining_desc):
        return [
            by_name,
            by_age,
            by_lives_remaining_desc,
            ordering_comparer.reverse(by_age),
            ordering_comparer.get_composite(by_name, by_age, by_lives_remaining_desc),
            ordering_comparer.get_composite(
                ordering_comparer.reverse(by_name), by_lives_remaining_desc
            ),
        ]

    def test_reflexive(self, by_name, by_age, by_lives_remaining_desc, shuffled_cats) -> None:
        for comparer in self._comparers(by_name, by_age, by_lives_remaining_desc):
            for cat in shuffled_cats:
                assert comparer.compare(cat, cat) == 0

    def test_antisymmetric(self, by_name, by_age, by_lives_remaining_desc, shuffled_cats) -> None:
        for comparer in self._comparers(by_name, by_age, by_lives_remaining_desc):
            for a in shuffled_cats:
                for b in shuffled_cats:
                    assert sign(comparer.compare(a, b)) == -sign(comparer.compare(b, a))

    def test_transitive(self, by_name, by_age, by_lives_remaining_desc, shuffled_cats) -> None:
        for comparer in self._comparers(by_name, by_age, by_lives_remaining_desc):
            for a in shuffled_cats:
                for b in shuffled_cats:
                    for c in shuffled_cats:
                        if comparer.compare(a, b) <= 0 and comparer.compare(b, c) <= 0:
                            assert comparer.compare(a, c) <= 0

    def test_results_are_normalized(self, by_name, by_age, by_lives_remaining_desc, shuffled_cats) -> None:
        for comparer in self._comparers(by_name, by_age, by_lives_remaining_desc):
            for a in shuffled_cats:
                for b in shuffled_cats:
                    assert comparer.compare(a, b) in (-1, 0, 1)
