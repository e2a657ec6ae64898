# judgekit

A collection of classic online-judge exercises. Each one is a plain Python
function. It takes ordinary Python values and returns the answer. Bad input
raises `ValueError`.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install ".[test]"
```

## Modules

- `judgekit.arithmetic`: numeric warm-ups. It has `add`, `subtract`,
  `divide`, `bridge_count`, `factorial`, `pair_sums`, `compare`,
  `adjusted_average`, `hex_to_int`, `honeycomb_distance`, `hello`,
  `odd_summary`, `digit_counts`, `long_multiplication`, `count_up`,
  `count_down`, `sort_three`, `snail_days`, `minimum_melodies`,
  `factor_verdicts`, `right_triangles` and `page_siblings`.
- `judgekit.text`: string exercises. It has `word_count`,
  `most_common_letter`, `palindrome_verdicts`, `vowel_counts`, `time_until`,
  `ball_position`, `octopus_values`, `longest_runs`, `repeat_characters`,
  `min_max_sum` and `is_valid_parentheses`.
- `judgekit.sequences`: list exercises. It has `zero_sum`, `atm_total`,
  `merge_sorted`, `sort_numbers`, `longest_increasing`, `max_wine`,
  `min_fuel_cost`, `seven_dwarfs`, `nth_decreasing`, `line_order` and
  `line_up`.
- `judgekit.grids`: board exercises. It has `min_repaint`, `largest_square`,
  `star_pattern`, `bingo_turn` and `max_candies`.
- `judgekit.puzzles`: the remaining exercises. It has `hanoi_moves`,
  `primes_between`, `print_order`, `lead_times`, `lowest_common_ancestor`
  and `run_ac`.

Some functions take a sequence of input lines or pairs and stop at a
terminator, in the way the exercise defines it. For example,
`palindrome_verdicts` stops at `"0"`, `vowel_counts` and `octopus_values`
stop at `"#"`, and `pair_sums` stops at `(0, 0)`.

## Example

```python
from judgekit.arithmetic import bridge_count
from judgekit.text import is_valid_parentheses
from judgekit.puzzles import hanoi_moves, run_ac

bridge_count(2, 2)               # 1
is_valid_parentheses("(())()")   # True
hanoi_moves(2)                   # [(1, 2), (1, 3), (2, 3)]
run_ac("RDD", [1, 2, 3, 4])      # [2, 1]
```

## What it does not do

The package has no command-line program. It does not read standard input
or print formatted judge output. You call the functions from Python and
format the results yourself.

## Running the tests

```
pytest
```