import logging
from typing import Callable, Iterable

from interactive.chooser.sources import ItemSourceBase, Window

log = logging.getLogger(__name__)


def parse_wmctrl_list(output: str) -> list[Window]:
    """Parse `wmctrl -l` output: window id, desktop (-1 for sticky windows), client host, then the title"""
    windows = []
    for line in output.splitlines():
        if not line.strip():
            continue
        parts = line.split(None, 3)
        if len(parts) < 3:
            log.warning(f'skipping unrecognised wmctrl line: {line!r}')
            continue
        try:
            window_id = int(parts[0], 16)
            desktop = int(parts[1])
        except ValueError:
            log.warning(f'skipping unrecognised wmctrl line: {line!r}')
            continue
        title = parts[3] if len(parts) > 3 else ''
        windows.append(Window(window_id, desktop, parts[2], title))
    return windows


def _run_wmctrl() -> str:
    from plumbum import local
    return local['wmctrl']('-l')


class WmctrlItemSource(ItemSourceBase):
    """Windows managed by the window manager, in its client list order, as reported by wmctrl.
    If a whitelist is given only those windows are offered; blacklisted windows never are."""
    def __init__(self, whitelist: Iterable[int] = (), blacklist: Iterable[int] = (), list_windows: Callable[[], str] = _run_wmctrl):
        self.whitelist = set(whitelist)
        self.blacklist = set(blacklist)
        self.list_windows = list_windows

    def wanted(self, window: Window) -> bool:
        if self.whitelist and window.id not in self.whitelist:
            return False
        return window.id not in self.blacklist

    def items(self) -> list[Window]:
        found = parse_wmctrl_list(self.list_windows())
        kept = [w for w in found if self.wanted(w)]
        log.debug(f'wmctrl listed {len(found)} windows, keeping {len(kept)}')
        return kept
