# dsakit

Plain-Python implementations of classic data structures: singly and doubly
linked lists, a growable array list, max- and min-heaps with heap sort,
binary trees with their traversals, binary search trees, and an undirected
graph with breadth- and depth-first traversal. The containers hold ordinary
Python values and follow Python's protocols (`len`, `in`, iteration,
`reversed`). Taking from an empty container or reading past its end raises
`IndexError`.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList` |
| `dsakit.array_list` | `ArrayList`, an array whose capacity doubles when it is full |
| `dsakit.heaps` | `MaxHeap`, `MinHeap`, `build_max_heap`, `heap_sort` |
| `dsakit.binary_tree` | `TreeNode`, `BinaryTree`, `preorder`, `inorder`, `postorder`, `level_order`, `levels`, `build_from_preorder`, `lowest_common_ancestor` |
| `dsakit.bst` | `BinarySearchTree` and the node-level functions `bst_insert`, `bst_search`, `bst_min`, `bst_max`, `bst_delete`, `kth_smallest` |
| `dsakit.graph` | `Graph` with `add_edge`, `bfs` and `dfs` |

## Examples

### Linked lists

```python
from dsakit.linked_lists import SinglyLinkedList, DoublyLinkedList

items = SinglyLinkedList([10, 20, 30])
items.remove(20)           # True; returns False if the value is absent
print(list(items))         # [10, 30]
print(10 in items)         # True
print(items)               # 10 -> 30 -> NULL

more = SinglyLinkedList([3, 4])
items.concat(more)         # moves the nodes of `more`, leaving it empty
print(list(items), len(more))  # [10, 30, 3, 4] 0

both = DoublyLinkedList([100, 200, 300])
both.push_front(50)
print(list(reversed(both)))  # [300, 200, 100, 50]
```

### Array list

```python
from dsakit.array_list import ArrayList

values = ArrayList(2)
for value in (69, 420, 33):
    values.append(value)
print(values.capacity())   # 4
print(values[2])           # 33
del values[1]
print(list(values))        # [69, 33]
print(values.pop_first(), values.last())  # 69 33
```

Indices must lie in `0 .. len - 1`; negative indices raise `IndexError`.

### Heaps

```python
from dsakit.heaps import MaxHeap, MinHeap, build_max_heap, heap_sort

heap = MaxHeap()
for value in (50, 55, 53, 52, 54):
    heap.push(value)
print(heap.pop())          # 55
print(heap.peek())         # 54

small = MinHeap()
for value in (40, 10, 30):
    small.push(value)
print(small.pop(), 30 in small)  # 10 True

print(build_max_heap([54, 53, 55, 52, 50])[0])  # 55
print(heap_sort([54, 53, 55, 52, 50]))          # [50, 52, 53, 54, 55]
```

### Binary trees

```python
from dsakit.binary_tree import (
    build_from_preorder, inorder, preorder, postorder, levels,
    lowest_common_ancestor,
)

# Preorder values, -1 marks an empty child.
root = build_from_preorder([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
print(list(preorder(root)))   # [1, 3, 7, 11, 5, 17]
print(list(inorder(root)))    # [7, 3, 11, 1, 17, 5]
print(list(postorder(root)))  # [7, 11, 3, 17, 5, 1]
print(levels(root))           # [[1], [3, 5], [7, 11, 17]]
print(lowest_common_ancestor(root, 7, 11).value)  # 3
```

`build_from_preorder` also accepts strings holding integers, so the tokens of
a line of text can be passed straight in; it raises `ValueError` if the tokens
run out before the tree is complete.

### Binary search trees

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree([50, 30, 70, 20, 40, 60, 80])
tree.remove(70)
print(list(tree))            # [20, 30, 40, 50, 60, 80]
print(tree.min(), tree.max())  # 20 80
print(tree.kth_smallest(3))  # 40
print(tree.insert(40))       # False: each value is held once
```

The node-level functions work on `TreeNode` roots directly; `bst_insert`
places equal values to the left, and `bst_min`/`bst_max` raise `ValueError`
on an empty tree.

### Graphs

```python
from dsakit.graph import Graph

g = Graph(6)
for u, v in [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (5, 4), (5, 1)]:
    g.add_edge(u, v)
print(g.bfs(0))   # [0, 1, 2, 3, 4, 5]
print(g.dfs(0))   # [0, 2, 5, 4, 1, 3]
```

Edges are undirected; neighbours are considered in the order their edges
were added. Vertices outside `0 .. vertices - 1` raise `IndexError`.

## What dsakit does not include

dsakit has no dedicated stack or queue types, and no general-purpose sorting
or searching routines other than `heap_sort`; Python's `list`,
`collections.deque`, `sorted` and `bisect` serve those needs. It is a library
only and installs no command-line tool.