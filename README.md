# algokit

A small collection of classic data structures and algorithms written in
plain Python. Most structures come with a command-line driver that reads a
script of commands from standard input and prints the answers to standard
output.

No runtime dependencies beyond the standard library.

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
| `algokit.stack` | `IntStack` – a plain integer stack |
| `algokit.minqueue` | `MinStack`, `MinQueue` – stack and two-stack queue with a minimum query |
| `algokit.brackets` | `is_balanced` – checks `()`, `[]`, `{}` sequences |
| `algokit.intervals` | `min_cover_length`, `covers_all`, `outer_minimums`, `merge_segments` |
| `algokit.sorting` | `quicksort`, `kth_smallest`, `count_inversions`, `radix_sort`, `generate_sequence` |
| `algokit.selection` | `next_element`, `k_smallest_generated`, `min_max_position` |
| `algokit.minmax_heap` | `MinMaxHeap` – double-ended priority queue |
| `algokit.indexed_heap` | `IndexedMinHeap` – min-heap with decrease-key by request number |
| `algokit.cartesian` | `CartesianNode`, `build_cartesian_tree`, `describe_nodes` – linear-time Cartesian tree construction |
| `algokit.hashset` | `ChainedHashSet` – hash set with separate chaining |
| `algokit.rabin_karp` | `prefix_hashes`, `find_occurrences` – rolling-hash substring search |
| `algokit.avl` | `AVLTree` – balanced search tree with a lower-bound lookup (`next_at_least`) |
| `algokit.sum_treap` | `SumTreap` – set of integers answering range sums |

Empty structures raise `IndexError` from `pop`, `min` and similar queries;
`AVLTree.delete` raises `KeyError` for a missing key.

## Library use

```python
from algokit.minqueue import MinQueue
from algokit.avl import AVLTree
from algokit.sorting import count_inversions

queue = MinQueue()
for value in (5, 2, 8):
    queue.push(value)
print(queue.min())              # 2
print(queue.pop())              # 5

tree = AVLTree([10, 3, 7])
print(7 in tree)                # True
print(tree.next_at_least(4))    # 7
print(list(tree))               # [3, 7, 10]

print(count_inversions([3, 1, 2]))  # 2
```

## Command-line drivers

Each driver reads its commands from standard input:

```
algokit-stack          # push N / pop / back / size / clear / exit
algokit-minqueue       # count, then enqueue N / dequeue / front / size / clear / min
algokit-brackets       # one bracket sequence; prints YES or NO
algokit-minmax-heap    # count, then insert N / extract_min / extract_max / get_min / get_max / size / clear
algokit-indexed-heap   # count, then insert N / getMin / extractMin / decreaseKey I D
algokit-cartesian      # count, then "key priority" pairs; prints parent/left/right per node
algokit-hashset        # count, then "+ N", "- N", "? N"
algokit-avl            # count, then "+ N" and "? N"
algokit-sum-treap      # count, then "+ N" and "? L R"
```

In `algokit-stack`, `back` prints the top value and also removes it. For
example:

```
printf 'push 3\npush 4\nback\nsize\nexit\n' | algokit-stack
```

prints `ok`, `ok`, `4`, `1` and `bye`.

## What it does not do

There is no general ordered set with successor, predecessor and k-th
element queries, and no driver for one. The closest structures are
`AVLTree`, which finds the smallest key not below a given one, and
`SumTreap`, which sums the keys in a range.