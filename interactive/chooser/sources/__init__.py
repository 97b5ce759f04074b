from sink.errors import stub

# Xorg window IDs are 32-bit unsigned
MAX_WINDOW_ID = 0xffffffff


class Window:
    """A top level window that can be chosen"""
    def __init__(self, window_id: int, desktop: int = 0, host: str = '', title: str = ''):
        self.id = window_id
        self.desktop = desktop
        self.host = host
        self.title = title
    def describe(self) -> str:
        return self.title or f'0x{self.id:x}'
    def __eq__(self, other) -> bool:
        return isinstance(other, Window) and other.id == self.id
    def __hash__(self) -> int:
        return hash(self.id)
    def __str__(self) -> str:
        return f'0x{self.id:x} {self.title}'
    def __repr__(self) -> str:
        return f'Window(0x{self.id:x}, {self.title!r})'


class ItemSourceBase:
    """Supplies the candidates for one selection, in the order they should be labelled"""
    def items(self) -> list:
        stub()


class StaticItemSource(ItemSourceBase):
    def __init__(self, items: list):
        self._items = list(items)
    def items(self) -> list:
        return list(self._items)
