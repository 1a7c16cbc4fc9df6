from hypothesis import given
from hypothesis import strategies as st

from hashkit.single_number import single_number


def test_documented_example():
    assert single_number([4, 1, 2, 1, 2]) == 4


def test_single_element():
    assert single_number([-3]) == -3


def test_empty_gives_zero():
    assert single_number([]) == 0


@given(
    st.lists(st.integers(min_value=-1000, max_value=1000), unique=True, max_size=20),
    st.integers(min_value=-1000, max_value=1000),
    st.randoms(),
)
def test_finds_unpaired_value(pairs, single, rnd):
    pairs = [p for p in pairs if p != single]
    nums = pairs + pairs + [single]
    rnd.shuffle(nums)
    assert single_number(nums) == single


@given(st.lists(st.integers(), max_size=20))
def test_fully_paired_gives_zero(values):
    assert single_number(values + values[::-1]) == 0