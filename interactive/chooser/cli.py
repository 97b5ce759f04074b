import argparse
import logging
import os
import sys
from typing import Callable

from plumbum.commands.processes import CommandNotFound, ProcessExecutionError

from interactive.chooser.alphabet import Alphabet
from interactive.chooser.overlays import OverlayBase
from interactive.chooser.session import Cancelled, SelectionSession, Selected
from interactive.chooser.sources import MAX_WINDOW_ID, ItemSourceBase
from interactive.chooser.tree import build
from sink.errors import ConfigError

log = logging.getLogger(__name__)

DESCRIPTION = '''Draws a string of characters next to each window. Typing one of those strings prints the
corresponding window ID to standard output and exits. If any non-matching key is pressed, the program
exits without printing anything. CHARACTERS defines the characters available for use in the displayed
strings; eg. 'asdfjkl' is a good choice for a QWERTY keyboard layout. Allowed characters are the numbers
0-9 and the letters a-z.'''

EPILOG = 'The program exits with status 0 on success, 64 on invalid arguments, and 70 if an unexpected error occurs.'


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(os.EX_USAGE, f'{self.prog}: error: {message}\n')


def window_id(value: str) -> int:
    try:
        w = int(value, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid value for window ID: {value}')
    if w <= 0 or w > MAX_WINDOW_ID:
        raise argparse.ArgumentTypeError(f'invalid value for window ID: {value}')
    return w


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='choose-window', description=DESCRIPTION, epilog=EPILOG)
    parser.add_argument('characters', metavar='CHARACTERS')
    parser.add_argument('-b', '--blacklist', metavar='WINDOWID', type=window_id, action='append', default=[],
                        help='IDs of windows to ignore (specify this option multiple times)')
    parser.add_argument('-w', '--whitelist', metavar='WINDOWID', type=window_id, action='append', default=[],
                        help='IDs of windows to include (include all if none specified) (specify this option multiple times)')
    parser.add_argument('-f', '--format', choices=['decimal', 'hexadecimal'], default='decimal',
                        help="Output format: 'decimal' or 'hexadecimal'")
    parser.add_argument('--print-tree', default=False, action='store_true',
                        help='log the label layout before asking for input')
    parser.add_argument('-v', '--verbose', default=False, action='store_true')
    return parser


def format_window_id(window_id: int, output_format: str) -> str:
    if output_format == 'hexadecimal':
        return f'0x{window_id:x}'
    return str(window_id)


def choose(session: SelectionSession, read_symbol: Callable[[], str | None]):
    """Feed keys into the session until it is finished. Returns the chosen item or None"""
    while not session.finished:
        session.consume(read_symbol())
    state = session.state
    if isinstance(state, Selected):
        return state.item
    if isinstance(state, Cancelled):
        return None
    raise Exception(f'Session finished in unhandled state {state!r}')


def run(args: argparse.Namespace, alphabet: Alphabet, source: ItemSourceBase, overlay: OverlayBase,
        read_symbol: Callable[[], str | None], out=None) -> int:
    out = out if out is not None else sys.stdout
    try:
        items = source.items()
    except (CommandNotFound, ProcessExecutionError, OSError) as e:
        log.error(f'could not list windows: {e}')
        return os.EX_SOFTWARE

    tree = build(items, alphabet)
    # logged before any label goes up, the session drops the layout as soon as it finishes
    if args.print_tree:
        log.info(f'label layout (depth {tree.depth}):\n{tree.dump()}')
    session = SelectionSession(tree, overlay)
    chosen = choose(session, read_symbol)
    if chosen is not None:
        print(format_window_id(chosen.id, args.format), file=out)
    return 0


def main(argv: list[str] | None = None) -> int:
    from interactive.chooser.keys import KeyReader
    from interactive.chooser.overlays.terminal import TerminalOverlay
    from interactive.chooser.sources.wmctrl import WmctrlItemSource

    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(name)s: %(levelname)s: %(message)s')
    if args.print_tree and not args.verbose:
        log.setLevel(logging.INFO)

    try:
        alphabet = Alphabet.from_characters(args.characters)
    except ConfigError as e:
        parser.error(f'CHARACTERS argument: {e}')

    source = WmctrlItemSource(whitelist=args.whitelist, blacklist=args.blacklist)
    reader = KeyReader(alphabet)
    try:
        return run(args, alphabet, source, TerminalOverlay(), reader.read_symbol)
    finally:
        reader.close()


if __name__ == '__main__':
    sys.exit(main())
