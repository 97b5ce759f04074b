import logging
from typing import Iterable

from interactive.chooser.overlays import OverlayBase
from interactive.chooser.tree import LabelNode, LabelTree

log = logging.getLogger(__name__)


class Reaper:
    """Owns the overlay side of a label tree: binds labels as they become typeable,
    and unbinds them before their nodes are dropped from the arena."""
    def __init__(self, tree: LabelTree, overlay: OverlayBase):
        self.tree = tree
        self.overlay = overlay
        self.bind_count = 0
        self.unbind_count = 0

    @property
    def live(self) -> int:
        return self.bind_count - self.unbind_count

    def bind_frontier(self, nodes: Iterable[LabelNode]):
        for n in nodes:
            if n.visual is not None:
                raise Exception(f'Label {self.tree.label(n)} is already bound')
            item = n.item if n.is_leaf else None
            n.visual = self.overlay.bind(n.index, self.tree.label(n), item)
            self.bind_count += 1
        self.overlay.refresh()

    def release(self, node: LabelNode):
        """Take down the label of a single node, if it has one"""
        if node.visual is None:
            return
        handle = node.visual
        node.visual = None
        self.overlay.unbind(handle)
        self.unbind_count += 1

    def prune(self, node: LabelNode):
        """Release a node and everything under it, then drop it from the arena"""
        self.release(node)
        for i in node.extent:
            n = self.tree.get(i)
            if n is not None:
                self.release(n)
        self.tree.discard(node.index)

    def prune_all(self, nodes: Iterable[LabelNode]):
        for n in list(nodes):
            self.prune(n)
        log.debug(f'pruned, {self.bind_count} binds / {self.unbind_count} unbinds')
