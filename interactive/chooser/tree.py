import logging
from typing import Any, Iterable, Iterator, TypeAlias

from interactive.chooser.alphabet import Alphabet

log = logging.getLogger(__name__)

Item: TypeAlias = Any


def label_depth(count: int, base: int) -> int:
    """Smallest depth D >= 1 such that base**D labels are enough for count items"""
    depth, reach = 1, base
    while reach < count:
        depth += 1
        reach *= base
    return depth


def partition(count: int, base: int) -> list[int]:
    """Sizes of the groups count items are split into, one group per key.
    The first count % base groups take one item more than the rest."""
    p, r = divmod(count, base)
    return [p + 1 if i < r else p for i in range(min(count, base))]


class LabelNode:
    """A node in the label arena. Leaves hold an item; inner nodes hold the index range of their children,
    and `extent` covers every descendant so the whole subtree can be dropped as one slice."""
    __slots__ = ('index', 'symbol', 'parent', 'item', 'children', 'extent', 'visual')

    def __init__(self, index: int, symbol: str, parent: int | None):
        self.index = index
        self.symbol = symbol
        self.parent = parent
        self.item: Item = None
        self.children = range(0)
        self.extent = range(0)
        self.visual = None

    @property
    def is_leaf(self) -> bool:
        return len(self.children) == 0

    def __repr__(self) -> str:
        if self.is_leaf:
            return f'LabelNode({self.index}, {self.symbol!r}, item={self.item!r})'
        return f'LabelNode({self.index}, {self.symbol!r}, children={self.children.start}..{self.children.stop - 1})'


class LabelTree:
    def __init__(self, alphabet: Alphabet, nodes: list[LabelNode | None], roots: range, count: int):
        self.alphabet = alphabet
        self.roots = roots
        self.count = count
        self.depth = label_depth(count, len(alphabet)) if count > 0 else 0
        self._nodes = nodes

    def node(self, index: int) -> LabelNode:
        n = self._nodes[index]
        if n is None:
            raise KeyError(f'Label node {index} has been discarded')
        return n

    def get(self, index: int) -> LabelNode | None:
        return self._nodes[index]

    def frontier(self) -> list[LabelNode]:
        """The top level labels"""
        return [self.node(i) for i in self.roots]

    def children(self, node: LabelNode) -> list[LabelNode]:
        return [self.node(i) for i in node.children]

    def label(self, node: LabelNode) -> str:
        """The keys that have to be typed from the top of the tree to reach node"""
        symbols = [node.symbol]
        parent = node.parent
        while parent is not None:
            p = self.node(parent)
            symbols.append(p.symbol)
            parent = p.parent
        return ''.join(reversed(symbols))

    def leaves(self) -> Iterator[LabelNode]:
        def walk(indices: range):
            for i in indices:
                n = self.node(i)
                if n.is_leaf:
                    yield n
                else:
                    yield from walk(n.children)
        return walk(self.roots)

    def path_of(self, item: Item) -> str | None:
        for leaf in self.leaves():
            if leaf.item == item:
                return self.label(leaf)
        return None

    def lookup(self, text: str) -> LabelNode | None:
        """Resolve typed keys to the node they lead to, if any"""
        level = self.roots
        found = None
        for c in text:
            found = None
            for i in level:
                n = self.get(i)
                if n is not None and n.symbol == c:
                    found = n
                    break
            if found is None:
                return None
            level = found.children
        return found

    def discard(self, index: int):
        """Drop a node and its whole subtree from the arena"""
        n = self.node(index)
        self._nodes[index] = None
        if n.extent:
            self._nodes[n.extent.start:n.extent.stop] = [None] * len(n.extent)

    def clear(self):
        self._nodes[:] = [None] * len(self._nodes)

    def bound(self) -> list[LabelNode]:
        """Live nodes currently holding a visual handle"""
        return [n for n in self._nodes if n is not None and n.visual is not None]

    @property
    def live(self) -> int:
        return sum(1 for n in self._nodes if n is not None)

    def __len__(self) -> int:
        return len(self._nodes)

    def dump(self) -> str:
        lines = []
        def walk(indices: range, depth: int):
            for i in indices:
                n = self.node(i)
                indent = '  ' * depth
                if n.is_leaf:
                    lines.append(f'{indent}{n.symbol} {n.item}')
                else:
                    lines.append(f'{indent}{n.symbol}')
                    walk(n.children, depth + 1)
        walk(self.roots, 0)
        return '\n'.join(lines)


def build(items: Iterable[Item], alphabet: Alphabet) -> LabelTree:
    """Lay items out under key labels. Items are split into one group per key, in order, with the
    earliest keys taking the remainder; groups of more than one item are split again with the same keys."""
    items = list(items)
    nodes: list[LabelNode | None] = []

    def allocate(group: list, parent: int | None) -> range:
        sizes = partition(len(group), len(alphabet))
        start = len(nodes)
        # siblings are allocated as one block before any of their descendants
        for i in range(len(sizes)):
            nodes.append(LabelNode(start + i, alphabet[i], parent))
        offset = 0
        for i, size in enumerate(sizes):
            node = nodes[start + i]
            chunk = group[offset:offset + size]
            offset += size
            if size == 1:
                node.item = chunk[0]
            else:
                first = len(nodes)
                node.children = allocate(chunk, node.index)
                node.extent = range(first, len(nodes))
        return range(start, start + len(sizes))

    roots = allocate(items, None)
    tree = LabelTree(alphabet, nodes, roots, len(items))
    log.debug(f'built {len(nodes)} labels for {len(items)} items over {len(alphabet)} keys, depth {tree.depth}')
    return tree
