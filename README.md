# dsbasics

A small collection of classic data structures, written to be read and
experimented with, plus a benchmark that compares lookup time in a linked
list and in a binary search tree.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## What is inside

| Module | Contents |
| --- | --- |
| `dsbasics.wallet` | `Wallet`, counting 500-won coins and 1000-won bills, with `balance()`; `InsufficientFundsError` |
| `dsbasics.arraylist` | `ArrayList`, a list with a fixed capacity (30000 by default); `ListFullError` |
| `dsbasics.stack` | `Stack` with `push`, `pop`, `peek`, `is_empty`, `clear`; `EmptyStackError` |
| `dsbasics.linkedlist` | `LinkedList` and `ListNode`, a singly linked list with `search` |
| `dsbasics.fifo` | `Queue` with `enqueue`, `dequeue`, `peek`, `is_empty`, `clear`; `EmptyQueueError` |
| `dsbasics.heap` | `Heap`, a bounded priority queue with a pluggable comparison (`max_first`, `min_first`); `HeapFullError` |
| `dsbasics.binary_tree` | `TreeNode` with `preorder`, `inorder`, `postorder` and `levelorder` generators |
| `dsbasics.bst` | `BinarySearchTree` with `insert`, `search`, `in` and ascending iteration |
| `dsbasics.arrays` | `inc_sorted`, `dec_sorted`, `shuffle`, `random_permutation`, `format_array` |
| `dsbasics.search_bench` | `average_search_time` and the `dsbasics-search` command |

## Examples

    from dsbasics.stack import Stack
    from dsbasics.heap import Heap, max_first
    from dsbasics.bst import BinarySearchTree
    from dsbasics.arrays import format_array

    stack = Stack()
    for n in (1, 2, 3):
        stack.push(n)
    stack.pop()            # 3

    heap = Heap(max_first, 99)
    for n in (9, 20, 30, 15):
        heap.push(n)
    heap.pop()             # 30

    tree = BinarySearchTree()
    for n in (12, 8, 9, 17):
        tree.insert(n)     # True; inserting a value already present returns False
    9 in tree              # True
    list(tree)             # [8, 9, 12, 17]

    format_array([1, 2, 3])  # "[1 2 3 ]"

Operations that cannot succeed raise: popping an empty stack raises
`EmptyStackError`, dequeuing from an empty queue raises `EmptyQueueError`,
taking more coins or bills than a wallet holds raises `InsufficientFundsError`,
adding to a full `ArrayList` raises `ListFullError`, pushing onto a full
`Heap` raises `HeapFullError`, popping an empty `Heap` raises `IndexError`,
and an index outside a list raises `IndexError`.

## Lookup benchmark

    dsbasics-search
    dsbasics-search --size 10000 --seed 1

The command shuffles the numbers 1 to `--size` (100 by default), loads them
into a `LinkedList` and a `BinarySearchTree`, looks up every number in each,
and prints how many were found and the average time per lookup in
milliseconds. `--seed` makes the shuffle repeatable.

## What this package does not do

It has no sorting algorithms and no command for timing how work grows with
input size; the only benchmark is the lookup comparison above.