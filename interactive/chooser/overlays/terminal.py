import sys
from typing import TextIO

from interactive.chooser.overlays import OverlayBase


class TerminalLabel:
    def __init__(self, node_id: int, text: str, description: str):
        self.node_id = node_id
        self.text = text
        self.description = description


class TerminalOverlay(OverlayBase):
    """Lists the typeable labels in the terminal, one per line, redrawn after every key.
    Writes to stderr by default so stdout only carries the result."""
    def __init__(self, title: str = 'choose a window', file: TextIO | None = None):
        self.title = title
        self.file = file if file is not None else sys.stderr
        self.labels: dict[int, TerminalLabel] = {}

    def bind(self, node_id: int, label_text: str, item) -> TerminalLabel:
        description = item.describe() if hasattr(item, 'describe') else ('...' if item is None else str(item))
        handle = TerminalLabel(node_id, label_text, description)
        self.labels[node_id] = handle
        return handle

    def unbind(self, handle: TerminalLabel) -> None:
        if self.labels.get(handle.node_id) is not handle:
            raise Exception(f'Unbinding a label that is not shown: {handle.text}')
        del self.labels[handle.node_id]

    def refresh(self) -> None:
        from prompt_toolkit import print_formatted_text
        from prompt_toolkit.formatted_text import HTML
        print_formatted_text(HTML('<b>{}</b>').format(self.title), file=self.file)
        for label in self.labels.values():
            print_formatted_text(HTML('  <yellow>{}</yellow>  {}').format(label.text, label.description), file=self.file)
