# dsakit

Classic data structures and algorithms in plain Python, with no dependencies
outside the standard library. Python 3.10 or later is required.

## What is in it

- **`dsakit.graphs`**: graphs given as square adjacency matrices (lists of rows).
  - `breadth_first(adjacency, start)` and `depth_first(adjacency, start)` return
    the visiting order of the vertices reachable from `start`; an edge from `u`
    to `v` exists where `adjacency[u][v] == 1`. Depth-first uses a stack, so
    the highest-numbered neighbour is visited first.
  - `breadth_first_all` and `depth_first_all` continue from each still
    unvisited vertex, in index order, so every vertex appears.
  - `dijkstra(graph, source)` returns the list of shortest distances from
    `source`; a non-zero entry is an edge weight and unreachable vertices get
    `math.inf`.
  - `kruskal_mst(vertex_count, edges)` takes `Edge(src, dest, weight)` objects
    or `(src, dest, weight)` tuples and returns the chosen `Edge`s of a minimum
    spanning forest, in the order they were picked.
  - `prim_mst(graph)` grows a tree from vertex 0 and returns
    `Edge(parent, child, weight)` for children 1 to n-1; it raises `ValueError`
    for a graph that is not connected.
  - Out-of-range vertices and non-square matrices raise `ValueError`.
- **`dsakit.sorting`**: `bubble_sort`, `insertion_sort` and `selection_sort`
  take any iterable and return a new ascending list.
- **`dsakit.trees`**: `TreeNode(value, left, right)`, the generator traversals
  `preorder`, `inorder` and `postorder`, and `BinarySearchTree`, which ignores
  duplicate values and has `insert` and the three traversals as methods.
- **Linked lists**: `SinglyLinkedList` (`dsakit.linked_list`),
  `CircularLinkedList` (`dsakit.circular_list`) and `DoublyLinkedList`
  (`dsakit.doubly_list`). All have `insert_front`, `insert_end`,
  `insert_after(value, key)`, `insert_before(value, key)`, `delete_front` and
  `delete_end`; `SinglyLinkedList` also has `delete_after(key)` and
  `delete_before(key)`. Deletions return the removed value. Key-relative
  operations act on the first node holding the key. Removing from an empty list
  raises `IndexError` and a missing key raises `ValueError`. The lists are
  iterable and sized, and `DoublyLinkedList` also supports `reversed()`.
- **`dsakit.queues`**: fixed-capacity `LinearQueue` (`enqueue`, `dequeue`,
  `peek`, `indices`), `CircularQueue` (`enqueue`, `dequeue`, default capacity
  2) and `BoundedDeque` (`push_front`, `push_back`, `pop_front`, `pop_back`,
  default capacity 5). A `LinearQueue` does not reuse slots: once `capacity`
  values have been enqueued it stays full. A full queue raises `QueueFullError`
  and an empty one raises `QueueEmptyError`, which is an `IndexError`.
- **`dsakit.stack`**: `BoundedStack(capacity)` with `push`, `pop`, `peek`,
  `is_full` and `is_empty`. It raises `StackOverflowError` when full and
  `StackUnderflowError` (an `IndexError`) when empty. Iteration runs from
  bottom to top.
- **`dsakit.expressions`**:
  - `infix_to_postfix(infix)` converts an expression of single-character
    operands (ASCII letters and digits) and `+ - * / ^` to postfix, ignoring
    other characters.
  - `infix_to_numeric_postfix(infix)` does the same for multi-digit
    non-negative integers, with the tokens separated by spaces.
  - `evaluate_postfix(postfix)` and `evaluate_infix(infix)` compute an integer
    result. Division truncates toward zero, and a non-positive exponent gives 1.
    All operators, `^` included, are left-associative.
  - Unbalanced parentheses or a malformed expression raise `ValueError`, and
    division by zero raises `ZeroDivisionError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsakit.expressions import infix_to_postfix, evaluate_infix

infix_to_postfix("A+B*C")   # "ABC*+"
evaluate_infix("3+4*2")     # 11
```

```python
from dsakit.trees import BinarySearchTree

tree = BinarySearchTree([50, 30, 20, 40, 70, 60, 80])
list(tree.inorder())     # [20, 30, 40, 50, 60, 70, 80]
list(tree.preorder())    # [50, 30, 20, 40, 70, 60, 80]
list(tree.postorder())   # [20, 40, 30, 60, 80, 70, 50]
```

```python
from dsakit.graphs import kruskal_mst

kruskal_mst(4, [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)])
# [Edge(src=2, dest=3, weight=4), Edge(src=0, dest=3, weight=5),
#  Edge(src=0, dest=1, weight=10)]
```

```python
from dsakit.stack import BoundedStack

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
stack.is_full()    # True
stack.pop()        # 2
```

```python
from dsakit.doubly_list import DoublyLinkedList

items = DoublyLinkedList([1, 3])
items.insert_after(2, 1)
list(items)             # [1, 2, 3]
list(reversed(items))   # [3, 2, 1]
len(items)              # 3
```

## Command line

`dsakit-eval` takes an infix expression over non-negative integers, as
arguments or, if none are given, as one line from standard input. It prints the
postfix form and the integer value, and exits with status 1 and a message on
standard error if the expression cannot be evaluated:

```
dsakit-eval "(3+4)*2"
```

```
Postfix expression: 3 4 + 2 *
Result of evaluation: 14
```

## What it does not do

Expression evaluation is the only command. The lists, queues, stacks, trees
and graph algorithms are used from Python code only; there are no interactive
menus for them, and nothing is saved between runs.