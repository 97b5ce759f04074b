from typing import Any, TypeAlias
from sink.errors import stub

Handle: TypeAlias = Any

class OverlayBase:
    """Shows labels to the user. Every label gets exactly one bind() while it can be typed,
    and exactly one unbind() of the returned handle when it is taken away."""
    def bind(self, node_id: int, label_text: str, item) -> Handle:
        """Put up a label. item is None for labels that lead to more labels"""
        stub()
    def unbind(self, handle: Handle) -> None:
        stub()
    def refresh(self) -> None:
        """Called once every label that can currently be typed has been bound"""
        pass
