import io
import os
import unittest

from interactive.chooser.alphabet import Alphabet
from interactive.chooser.cli import build_parser, choose, format_window_id, main, run
from interactive.chooser.overlays.memory import RecordingOverlay
from interactive.chooser.session import SelectionSession
from interactive.chooser.sources import ItemSourceBase, StaticItemSource, Window
from sink.unittest import LoggedTestCase

WINDOWS = [Window(0x100 + i, title=f'window {i}') for i in range(7)]

class FailingSource(ItemSourceBase):
    def items(self):
        raise OSError('wmctrl: cannot open display')


def keys(text: str):
    it = iter(text)
    return lambda: next(it, None)


class TestCli(LoggedTestCase):
    def test_parse_arguments(self):
        args = build_parser().parse_args(['asdf', '-b', '0x10', '-b', '17', '-w', '5', '-f', 'hexadecimal'])
        self.assertEqual(args.characters, 'asdf')
        self.assertEqual(args.blacklist, [16, 17])
        self.assertEqual(args.whitelist, [5])
        self.assertEqual(args.format, 'hexadecimal')
        self.assertFalse(args.print_tree)

    def test_invalid_arguments_exit_with_usage_status(self):
        for argv in [['asdf', '-b', '0'], ['asdf', '-w', 'nope'], ['asdf', '-b', str(0x100000000)],
                     ['asdf', '-f', 'octal'], []]:
            with self.assertRaises(SystemExit) as ctx:
                build_parser().parse_args(argv)
            self.assertEqual(ctx.exception.code, os.EX_USAGE, argv)

    def test_bad_characters_exit_with_usage_status(self):
        for characters in ['a', 'aa', 'aB']:
            with self.assertRaises(SystemExit) as ctx:
                main([characters])
            self.assertEqual(ctx.exception.code, os.EX_USAGE, characters)

    def test_format_window_id(self):
        self.assertEqual(format_window_id(58720263, 'decimal'), '58720263')
        self.assertEqual(format_window_id(58720263, 'hexadecimal'), '0x3800007')

    def test_choose(self):
        session = SelectionSession.start(WINDOWS, Alphabet('abc'), RecordingOverlay())
        self.assertEqual(choose(session, keys('ba')), WINDOWS[3])
        session = SelectionSession.start(WINDOWS, Alphabet('abc'), RecordingOverlay())
        self.assertIsNone(choose(session, keys('x')))
        # running out of input counts as an unrecognised key
        session = SelectionSession.start(WINDOWS, Alphabet('abc'), RecordingOverlay())
        self.assertIsNone(choose(session, keys('a')))

    def test_run_prints_chosen_window(self):
        args = build_parser().parse_args(['abc', '-f', 'hexadecimal', '--print-tree'])
        out = io.StringIO()
        overlay = RecordingOverlay()
        status = run(args, Alphabet('abc'), StaticItemSource(WINDOWS), overlay, keys('cb'), out=out)
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), '0x106\n')
        self.assertEqual(overlay.shown, [])

    def test_run_cancelled_prints_nothing(self):
        args = build_parser().parse_args(['abc'])
        out = io.StringIO()
        status = run(args, Alphabet('abc'), StaticItemSource(WINDOWS), RecordingOverlay(), keys('q'), out=out)
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), '')

    def test_run_single_window_needs_no_keys(self):
        args = build_parser().parse_args(['abc'])
        out = io.StringIO()
        overlay = RecordingOverlay()
        status = run(args, Alphabet('abc'), StaticItemSource(WINDOWS[:1]), overlay, keys(''), out=out)
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), f'{0x100}\n')
        self.assertEqual(overlay.calls, [])

    def test_run_single_window_print_tree(self):
        args = build_parser().parse_args(['abc', '--print-tree'])
        out = io.StringIO()
        status = run(args, Alphabet('abc'), StaticItemSource(WINDOWS[:1]), RecordingOverlay(), keys(''), out=out)
        self.assertEqual(status, 0)
        self.assertEqual(out.getvalue(), f'{0x100}\n')
        layouts = [r.getMessage() for r in self.logbuf.records if 'label layout' in r.getMessage()]
        self.assertEqual(len(layouts), 1)
        self.assertIn('a 0x100', layouts[0])

    def test_print_tree_comes_before_labels(self):
        test = self
        class LayoutCheckingOverlay(RecordingOverlay):
            def bind(self, node_id, label_text, item):
                test.assertTrue(any('label layout' in r.getMessage() for r in test.logbuf.records))
                return super().bind(node_id, label_text, item)
        args = build_parser().parse_args(['abc', '--print-tree'])
        overlay = LayoutCheckingOverlay()
        status = run(args, Alphabet('abc'), StaticItemSource(WINDOWS), overlay, keys('ba'), out=io.StringIO())
        self.assertEqual(status, 0)
        self.assertEqual(len(overlay.bind_calls), 5)

    def test_run_source_failure(self):
        args = build_parser().parse_args(['abc'])
        out = io.StringIO()
        status = run(args, Alphabet('abc'), FailingSource(), RecordingOverlay(), keys(''), out=out)
        self.assertEqual(status, os.EX_SOFTWARE)
        self.assertEqual(out.getvalue(), '')


if __name__ == '__main__':
    unittest.main()
