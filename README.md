# collectkit

Plain Python containers with explicit, comparator-driven behaviour. The
package has no dependencies outside the standard library.

| Module | Contents |
| --- | --- |
| `collectkit.slist_core` | `SNode`, `SListCore`: the linked-list core (insert, remove, access, splice) |
| `collectkit.slist` | `SList`: adds `reverse`, `sublist`, `copy_shallow`, `copy_deep`, `contains`, `contains_value`, `index_of`, `to_list`, `sort`, `foreach`, `filter`, `filter_mut` |
| `collectkit.slist_iter` | `SListIter`, `SListZipIter`: iterators that can `add`, `remove` or `replace` while walking |
| `collectkit.stack` | `Stack`, `StackIter`, `StackZipIter` |
| `collectkit.rbtree` | `RBTree`, `RBNode`, `Color`, `Violation`, `InvariantError` |
| `collectkit.treetable` | `TreeTable`, `TreeTableEntry`, `TreeTableIter` |
| `collectkit.treeset` | `TreeSet`, `TreeSetIter` |

## Installation

```
pip install collectkit
```

## Usage

```python
from collectkit.slist import SList
from collectkit.slist_iter import SListIter
from collectkit.stack import Stack
from collectkit.treetable import TreeTable
from collectkit.treeset import TreeSet

items = SList([5, 6, 7, 8, 9])
items.add_first(4)
print(items.sublist(1, 3).to_list())   # [5, 6, 7]

it = SListIter(items)
for value in it:
    if value == 7:
        it.remove()
print(items.to_list())                 # [4, 5, 6, 8, 9]

stack = Stack()
stack.push(1)
stack.push(2)
print(stack.pop())                     # 2


def cmp(a, b):
    return (a > b) - (a < b)


table = TreeTable(cmp)
table.add(3, "three")
table.add(1, "one")
print(table.get_first_key())           # 1
print(table.get_greater_than(1))       # 3

numbers = TreeSet(cmp)
for n in (3, 1, 2, 3):
    numbers.add(n)
print(list(numbers))                   # [1, 2, 3]
```

## Behaviour worth knowing

- **Identity matching in lists.** `SList.remove`, `contains`, `index_of`
  match elements with `is`, not `==`. Use `contains_value(element, cmp)` for
  value comparison; without `cmp` it uses `==`.
- **Positional inserts need an existing index.** `add_at`, `add_all_at` and
  `splice_at` insert before the element at `index`, so the index must be in
  range; use `add_last`, `add_all` or `splice` to append.
- **Copy versus move.** `add_all` copies the references of another list;
  `splice` moves its nodes and leaves it empty.
- **Filtering an empty list** with `filter` or `filter_mut` raises
  `IndexError`, as does `remove_all` on an empty list.
- **Comparators.** `TreeTable`, `TreeSet` and `RBTree` take
  `cmp(a, b)` returning a negative number, zero or a positive number. Without
  one, the keys' own ordering is used.
- **Tree lookups** that find nothing raise `KeyError`, including
  `get_greater_than` / `get_lesser_than` on the highest / lowest key.
  `TreeTable.contains_value` counts values matched by identity.
- **Adding to a `TreeSet`** an element equal to one already present keeps the
  stored element.
- **Stacks** iterate from the bottom element to the top; `peek` and `pop` on
  an empty stack raise `IndexError`.
- **Checking a tree.** `RBTree.check_invariants()` and
  `TreeTable.check_invariants()` return the black height (the sentinel leaves
  count as one) or raise `InvariantError`, whose `kind` is a `Violation`.

Operations that cannot complete raise an exception instead of returning a
status.

## Running the tests

```
pip install -e ".[test]"
pytest
```