from interactive.chooser.overlays import OverlayBase


class RecordedLabel:
    def __init__(self, node_id: int, text: str, item):
        self.node_id = node_id
        self.text = text
        self.item = item
    def __repr__(self) -> str:
        return f'RecordedLabel({self.node_id}, {self.text!r}, {self.item!r})'


class RecordingOverlay(OverlayBase):
    """Keeps labels in memory and records every call, for tests and headless runs"""
    def __init__(self):
        self.shown: list[RecordedLabel] = []
        self.calls: list[tuple] = []
        self.refreshes = 0

    def bind(self, node_id: int, label_text: str, item) -> RecordedLabel:
        handle = RecordedLabel(node_id, label_text, item)
        self.shown.append(handle)
        self.calls.append(('bind', node_id, label_text))
        return handle

    def unbind(self, handle: RecordedLabel) -> None:
        # by identity, two handles may carry the same text
        for i, h in enumerate(self.shown):
            if h is handle:
                del self.shown[i]
                break
        else:
            raise Exception(f'Unbinding a label that is not shown: {handle}')
        self.calls.append(('unbind', handle.node_id, handle.text))

    def refresh(self) -> None:
        self.refreshes += 1

    @property
    def bind_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == 'bind']

    @property
    def unbind_calls(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == 'unbind']

    def texts(self) -> list[str]:
        return [h.text for h in self.shown]
