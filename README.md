# hashkit

hashkit is a small library of hash-based helpers for common questions about
sequences and strings: duplicates, anagrams, the single unpaired value, the
most frequent values and pair sums. It has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Usage

### Duplicates

```python
from hashkit.duplicates import (
    contains_duplicate,
    contains_duplicate_pairwise,
    contains_duplicate_sorted,
    contains_duplicate_counting,
)

contains_duplicate([1, 2, 3, 1])   # True
contains_duplicate([1, 2, 3, 4])   # False
```

The four functions give the same answer by different means:

- `contains_duplicate` keeps a set of values already seen and stops at the
  first repeat. Values must be hashable.
- `contains_duplicate_pairwise` compares every pair of values. It works for
  unhashable values too, but takes quadratic time.
- `contains_duplicate_sorted` sorts a copy of the values and compares
  neighbours. Values must be orderable; the input is not changed.
- `contains_duplicate_counting` keeps a running count per value and stops as
  soon as a value is met a second time. Values must be hashable.

### Anagrams

```python
from hashkit.anagrams import (
    group_anagrams,
    is_anagram,
    is_anagram_sorted,
    is_anagram_lowercase,
)

group_anagrams(["eat", "tea", "tan", "ate", "nat", "bat"])
# [['bat'], ['eat', 'tea', 'ate'], ['tan', 'nat']]

is_anagram("anagram", "nagaram")  # True
is_anagram("rat", "car")          # False
```

`group_anagrams` puts words together when their sorted letters match.

- The groups are ordered by their sorted letters.
- Within a group, words keep the order they had in the input.

`is_anagram` compares counts of the characters. `is_anagram_sorted` compares
the sorted characters. `is_anagram_lowercase` counts into a fixed table of the
letters `a` to `z` and raises `ValueError` if either string holds any other
character.

### The single number

```python
from hashkit.single_number import single_number

single_number([4, 1, 2, 1, 2])  # 4
```

Every value but one should appear exactly twice. The result is the XOR of all
values, so an empty input gives `0`.

### Top k frequent values

```python
from hashkit.top_k import top_k_frequent

top_k_frequent([1, 1, 1, 2, 2, 3], 2)  # [1, 2]
```

The values come back from most to least frequent. When two values are equally
frequent, the larger value comes first. `ValueError` is raised if `k` is
negative or greater than the number of distinct values.

### Two sum

```python
from hashkit.two_sum import two_sum

two_sum([2, 7, 11, 15], 9)  # [0, 1]
two_sum([1, 2], 10)         # []
```

`two_sum` returns indices `[i, j]` with `i < j` whose values add up to the
target. It takes the first `j` that has a matching earlier value, paired with
the latest such earlier index, and returns an empty list when no pair exists.

## Running the tests

```
pytest
```