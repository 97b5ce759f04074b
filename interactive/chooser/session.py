import logging
from typing import Iterable, TypeAlias

from interactive.chooser.alphabet import Alphabet
from interactive.chooser.overlays import OverlayBase
from interactive.chooser.reaper import Reaper
from interactive.chooser.tree import Item, LabelNode, LabelTree, build
from sink.errors import InvalidStateError

log = logging.getLogger(__name__)


class AwaitingInput:
    """Labels are up and the next key decides which of them survive"""
    def __init__(self, frontier: list[LabelNode]):
        self.frontier = frontier
    def __repr__(self) -> str:
        return f'AwaitingInput({[n.symbol for n in self.frontier]})'

class Selected:
    def __init__(self, item: Item):
        self.item = item
    def __repr__(self) -> str:
        return f'Selected({self.item!r})'

class Cancelled:
    def __repr__(self) -> str:
        return 'Cancelled()'

SessionState: TypeAlias = AwaitingInput | Selected | Cancelled


class SelectionSession:
    """Narrows a label tree one key at a time until an item is chosen or the user gives up.

    With no items the session starts out cancelled, and with a single item it starts out selected,
    in both cases without putting up any labels."""
    def __init__(self, tree: LabelTree, overlay: OverlayBase):
        self.tree = tree
        self.reaper = Reaper(tree, overlay)
        self.typed = ''
        roots = tree.frontier()
        if len(roots) == 0:
            self._finish(Cancelled())
        elif len(roots) == 1 and roots[0].is_leaf:
            self._finish(Selected(roots[0].item))
        else:
            self.reaper.bind_frontier(roots)
            self.state: SessionState = AwaitingInput(roots)
            log.debug(f'awaiting input over {len(roots)} labels')

    @classmethod
    def start(cls, items: Iterable[Item], alphabet: Alphabet, overlay: OverlayBase) -> 'SelectionSession':
        return cls(build(items, alphabet), overlay)

    @property
    def finished(self) -> bool:
        return not isinstance(self.state, AwaitingInput)

    @property
    def frontier(self) -> list[LabelNode]:
        if isinstance(self.state, AwaitingInput):
            return self.state.frontier
        return []

    def consume(self, symbol: str | None) -> SessionState:
        """Feed one typed key. None stands for a key that isn't in the alphabet, and cancels like any other miss."""
        state = self.state
        if not isinstance(state, AwaitingInput):
            raise InvalidStateError(f'Selection already finished as {state!r}, cannot take key {symbol!r}')

        chosen = None
        for n in state.frontier:
            if n.symbol == symbol:
                chosen = n
                break

        if chosen is None:
            log.debug(f'no label for {symbol!r} after {self.typed!r}, cancelling')
            self.reaper.prune_all(state.frontier)
            return self._finish(Cancelled())

        self.typed += chosen.symbol
        self.reaper.prune_all(n for n in state.frontier if n is not chosen)
        # the chosen label is replaced by its children's labels, or by the result
        self.reaper.release(chosen)
        if chosen.is_leaf:
            return self._finish(Selected(chosen.item))

        children = self.tree.children(chosen)
        self.state = AwaitingInput(children)
        self.reaper.bind_frontier(children)
        log.debug(f'{self.typed!r} narrowed to {len(children)} labels')
        return self.state

    def _finish(self, state: SessionState) -> SessionState:
        if self.reaper.live != 0:
            raise Exception(f'{self.reaper.live} labels still bound when finishing as {state!r}')
        self.tree.clear()
        self.state = state
        log.debug(f'finished as {state!r}')
        return state
