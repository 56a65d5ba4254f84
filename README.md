# inttree

`inttree` is a binary search tree that holds integers. It is not balanced, and it allows duplicate values. An interactive shell comes with it so you can build trees and watch how they behave.

## Library

```python
from inttree.tree import IntBinaryTree

tree = IntBinaryTree([5, 3, 8, 3, 9])
tree.push(1)

list(tree.inorder())     # values in sorted order
list(tree.preorder())
list(tree.postorder())
tree.levels()            # a list of values for each level, top down
tree.height()            # number of levels

tree.remove(3)           # removes every node that holds 3, returns how many
tree.remove_duplicates() # keeps a single node for each value
tree.increment()         # adds 1 to every value in place, returns the tree

clone = tree.copy()      # an independent deep copy
print(tree)              # the tree drawn sideways, right subtree on top
```

- Values equal to a node's value go into its left subtree.
- `preorder()`, `inorder()` and `postorder()` are generators.
- `render()` returns the same drawing as `str(tree)`: each node on its own line, indented four spaces per level, children marked with `|--`.
- An empty tree is falsy. `tree.clear()` removes every node.
- The nodes are `inttree.tree.Node` objects with `value`, `left` and `right`; the root is `tree.root`.

## Shell

Start the shell with:

```
inttree
```

It prints the list of commands, then a `> ` prompt, and reads one command per line from standard input until `exit` or the end of input. The shell keeps two trees, numbered 0 and 1. Every command works on the tree that is currently selected; tree 0 is selected at the start.

| Command | Effect |
|---|---|
| `push [N]` | insert `N`, or a random value from 0 to 10 if `N` is left out |
| `print` | draw the tree sideways |
| `clear` | remove every value |
| `traverse preorder\|inorder\|postorder\|levels` | print the values in that order; `levels` prints one line per level, ending with `- ` and the number of values on it |
| `remove duplicates` / `remove N` | remove duplicate values, or every node that holds `N` |
| `switch` | select the other tree |
| `copy` | copy the selected tree into the other tree |
| `height` | print the height |
| `increment` | add 1 to every value |
| `cls` | clear the screen with the system's `cls` or `clear` command |
| `usage` | print the list of commands |
| `exit` | quit |

The command and its argument are separated by a single space. A number is read from the start of the argument, and anything after its digits is ignored; it must fit in a signed 32-bit integer. If the argument of `push` or `remove` is not a number, the shell prints an error to standard error and exits with status 1. An unknown command prints a message and the shell carries on; an unknown `traverse` order prints nothing.

The messages the shell prints are in Russian.

You can also drive the shell from code: `Shell(out, rng)` takes a writable text stream (standard output by default) and a `random.Random` (a new one by default). `Shell.run(lines)` works through an iterable of command lines, and `Shell.execute(line)` runs a single command and returns `False` for `exit`. `inttree.shell.usage()` returns the help text.