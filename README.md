# dsakit

A small collection of classic algorithms and data structures. Each one is written as
plain, readable Python. It also has a terminal Minesweeper and two games of chance.
The package is meant for learning, for interview practice, and for quick experiments.
It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `max_subarray`, `max_subarray_sum`, `max_subarray_sum_divide`, `next_greater_elements`, `stock_spans`, `find_bitonic_peak`, `search_bitonic`, `find_pair_with_sum`, `kth_smallest`, `smallest_missing`, `long_sequence_count`, `longest_increasing_subsequence`, `find_celebrity` |
| `dsakit.strings` | `is_balanced`, `longest_palindrome`, `longest_palindrome_dp`, `longest_common_subsequence`, `break_palindrome`, `count_anagram_occurrences`, `neo_sort`, `min_max_char`, `is_strong_password`, `to_24_hour`, `roman_to_int`, `roman_to_decimal` |
| `dsakit.numbers` | `binomial`, `catalan`, `fibonacci`, `reverse_number`, `is_palindrome_number`, `primes_up_to`, `cube_root`, `multiplication_table`, `hanoi_moves`, `number_pattern`, `matrix_add`, `matrix_multiply` |
| `dsakit.polynomial` | `Polynomial`, built from `Term`s, with `+` |
| `dsakit.multi_array` | `MultiArray`, an N-dimensional array stored flat |
| `dsakit.trees` | `TreeNode`, `inorder`, `preorder`, `postorder`, `level_order`, `diameter`, `lowest_common_ancestor`, `build_level_order`, `count_leaves`, `count_nodes`, `count_internal`, `tree_sum` |
| `dsakit.graphs` | `Graph` with `add_edge` and `bfs`, `reachable_bfs`, `prim_mst`, `strongly_connected_components` |
| `dsakit.nqueens` | `n_queens` |
| `dsakit.minesweeper` | `Minesweeper`, `Difficulty`, and a terminal game |
| `dsakit.games` | `Guess`, `judge_guess`, `play_guessing`, `craps_round`, `simulate_craps` |

Functions that need at least one item, such as `max_subarray_sum` and
`kth_smallest`, raise `ValueError` when given an empty sequence. Functions that
search for something, such as `search_bitonic`, `find_pair_with_sum` and
`find_celebrity`, return `None` when they find nothing.

## Examples

```python
from dsakit.arrays import max_subarray, max_subarray_sum, stock_spans
from dsakit.numbers import catalan, hanoi_moves, primes_up_to
from dsakit.strings import is_balanced, longest_palindrome, roman_to_decimal

max_subarray_sum([-2, -3, 4, -1, -2, 1, 5, -3])   # 7
max_subarray([-2, -3, 4, -1, -2, 1, 5, -3])       # (7, 2, 6)
stock_spans([100, 80, 60, 70, 60, 75, 85])        # [1, 1, 1, 2, 1, 4, 6]
[catalan(n) for n in range(6)]                    # [1, 1, 2, 5, 14, 42]
primes_up_to(20)                                  # [2, 3, 5, 7, 11, 13, 17, 19]
hanoi_moves(2)                                    # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
is_balanced("{[()]}")                             # True
longest_palindrome("forgeeksskeegfor")            # 'geeksskeeg'
roman_to_decimal("MCMIV")                         # 1904
```

Trees, graphs and polynomials:

```python
from dsakit.graphs import Graph, prim_mst
from dsakit.polynomial import Polynomial
from dsakit.trees import build_level_order, diameter, inorder

root = build_level_order([10, 20, 30, 40, 50, 60, 70])
inorder(root)        # [40, 20, 50, 10, 60, 30, 70]
diameter(root)       # 4

g = Graph(4)
for source, target in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(source, target)
g.bfs(2)             # [2, 0, 3, 1]

prim_mst([
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
])                   # [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]

p = Polynomial([(2, 2), (3, 1)]) + Polynomial([(5, 1), (6, 0)])
str(p)               # '2x^(2) + 8x^(1) + 6x^(0)'
```

An N-dimensional array and the N-queens puzzle:

```python
from dsakit.multi_array import MultiArray
from dsakit.nqueens import n_queens

grid = MultiArray(2, 3)
grid[1, 2] = 7
grid.flat_index(1, 2)   # 5
grid.back()             # 7

n_queens(4)             # [[2, 4, 1, 3], [3, 1, 4, 2]]
```

Games, with a seeded random generator for repeatable results:

```python
import random
from dsakit.games import judge_guess, play_guessing, simulate_craps
from dsakit.minesweeper import Difficulty, Minesweeper

judge_guess(30, 40)                     # Guess.TOO_HIGH
play_guessing(30, [25, 40, 30])         # 3
wins, losses = simulate_craps(1000, random.Random(1))

game = Minesweeper(Difficulty.BEGINNER.side, Difficulty.BEGINNER.mine_count,
                   random.Random(7))
game.reveal(4, 4)                       # False: the first move never hits a mine
print(game.render())
```

## Command-line tools

Convert a Roman numeral to an integer:

```
dsakit-roman MCMXCIV
```

This prints `1994`. Without an argument, or for a string that is not made of
Roman numeral letters, it prints a message to standard error.

Play Minesweeper in the terminal. Enter moves as `row column`:

```
dsakit-minesweeper
dsakit-minesweeper --level 1 --seed 42
```

`--level` picks 0 (beginner, 9 by 9 with 10 mines), 1 (intermediate, 16 by 16
with 40 mines) or 2 (advanced, 24 by 24 with 99 mines); without it the game asks.
`--seed` makes the mine layout repeatable.

## What the package does not do

There are no sorting routines, no linked lists, stacks or queues, and no
trie-based functions in the package. For sorting, use Python's built-in
`sorted`; for stacks and queues, `list` and `collections.deque`. The number
guessing game and the craps simulator are functions only and have no
command of their own.