# cupds

A collection of classic data structures and algorithms in plain Python,
with no runtime dependencies.

## What is inside

- **Searching** (`cupds.search`): `linear_search`, `binary_search`
  (both return an index or -1).
- **Bit tricks** (`cupds.bits`): `is_on`, `ls_one`, `set_bit`,
  `clear_bit`, `last_one_off`, `last_zero_on`, `toggle_bit`, `set_all`,
  `modulo`, `is_power_of_two`.
- **Strings** (`cupds.lexical`): `lexicographical_compare`.
- **Linear structures**:
  - `cupds.vector.Vector`: a growable array that doubles its capacity
    when full and halves it when a quarter full.
  - `cupds.dlist.ListHead`: a circular doubly linked list whose head is
    a node of the same type, with add, move, splice, cut and rotate
    operations.
  - `cupds.hlist.HListHead` / `HListNode`: a doubly linked list with a
    single-pointer head, as used for hash buckets.
  - `cupds.stack.Stack`: a stack kept on a `ListHead` list.
  - `cupds.priority_queue.PriorityQueue`: lowest priority value first,
    ties in push order.
- **Trees**:
  - `cupds.tree`: `TreeNode`, `left_rotate`, `right_rotate`,
    `preorder`, `inorder`, `postorder`, `inorder_successor`.
  - `cupds.bst.BstNode`: an integer search tree that chains equal
    values on `next`.
  - `cupds.bstgeneric.Bst`: a search tree ordered by a comparison
    function, with `compare_words` and `compare_numeric`.
  - `cupds.avl.AvlTree`, `cupds.rbtree.RedBlackTree`: self-balancing
    trees.
  - `cupds.heap.Heap` (bounded binary heap, raises `HeapFullError` when
    full) and `heapsort`.
  - `cupds.fenwick.FenwickTree`: prefix and range sums over positions
    `1 .. size`.
  - `cupds.segtree.SegmentTree`: sums over half-open ranges.
- **Graphs**: `cupds.unionfind.UnionFind`, and `Edge`, `kruskal` and
  `prim` for minimum spanning tree cost in `cupds.mst`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it as a library

```python
from cupds.search import linear_search
from cupds.unionfind import UnionFind
from cupds.mst import Edge, kruskal
from cupds.rbtree import RedBlackTree

print(linear_search([4, 8, 15, 16, 23, 42], 16))   # 3

uf = UnionFind(5)
uf.union_set(0, 1)
uf.union_set(1, 2)
print(uf.in_same_set(0, 2))   # True
print(uf.in_same_set(0, 4))   # False

print(kruskal([Edge(0, 1, 4), Edge(1, 2, 1), Edge(0, 2, 2)]))   # 3

tree = RedBlackTree()
for value in (5, 1, 9, 3):
    tree.insert(value)
print(list(tree))   # [1, 3, 5, 9]
```

## Command-line tools

Each demo program is installed as a command:

| Command            | What it does                                                         |
|--------------------|----------------------------------------------------------------------|
| `cupds-search`     | Runs linear search over arrays of growing size and prints positions  |
| `cupds-vector`     | Reads a count and that many lines, then removes items from a vector  |
| `cupds-pq`         | Pushes three items into a priority queue and prints them as they pop |
| `cupds-listdemo`   | Menu-driven list and stack, read from standard input                 |
| `cupds-bst`        | Builds a small search tree, then looks up numbers from stdin         |
| `cupds-avl`        | Builds a small AVL tree and prints it in order                       |
| `cupds-segtree`    | Reads a size and that many numbers, prints the segment tree array    |
| `cupds-bstgeneric` | Sorts words (until `exit`) or, given a count, numbers via a tree     |
| `cupds-mst`        | Reads an edge count and `u v w` lines, prints the MST cost           |

For example, to compute a minimum spanning tree from standard input:

```
cupds-mst < edges.txt
```

and to sort five numbers through the comparator-driven tree:

```
echo "42 7 19 3 8" | cupds-bstgeneric 5
```

## What it does not do

- It has no sorting algorithm collection and no command that times
  sorting on random data; `heapsort` is the only sort provided.
- There is no command that runs randomised checks of the heap or the
  red-black tree.
- The trees support insertion, lookup and traversal only: `AvlTree`,
  `RedBlackTree`, `BstNode` and `Bst` have no removal.