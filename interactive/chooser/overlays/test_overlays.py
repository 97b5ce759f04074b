import unittest

from interactive.chooser.overlays import OverlayBase
from interactive.chooser.overlays.memory import RecordingOverlay
from interactive.chooser.overlays.terminal import TerminalOverlay
from interactive.chooser.sources import Window
from sink.errors import NotImplementedError
from sink.unittest import LoggedTestCase

class TestOverlays(LoggedTestCase):
    def test_base_is_abstract(self):
        overlay = OverlayBase()
        with self.assertRaises(NotImplementedError):
            overlay.bind(0, 'a', None)
        with self.assertRaises(NotImplementedError):
            overlay.unbind(object())
        overlay.refresh()

    def test_recording_overlay(self):
        overlay = RecordingOverlay()
        first = overlay.bind(0, 'a', 'x')
        second = overlay.bind(1, 'b', None)
        self.assertEqual(overlay.texts(), ['a', 'b'])
        overlay.unbind(first)
        self.assertEqual(overlay.shown, [second])
        self.assertEqual(overlay.calls, [('bind', 0, 'a'), ('bind', 1, 'b'), ('unbind', 0, 'a')])
        with self.assertRaises(Exception):
            overlay.unbind(first)

    def test_terminal_overlay_bookkeeping(self):
        overlay = TerminalOverlay()
        window = overlay.bind(3, 'as', Window(0x2a, title='terminal'))
        group = overlay.bind(4, 'd', None)
        self.assertEqual(window.description, 'terminal')
        self.assertEqual(group.description, '...')
        self.assertEqual([l.text for l in overlay.labels.values()], ['as', 'd'])
        overlay.unbind(window)
        self.assertEqual(list(overlay.labels), [4])
        with self.assertRaises(Exception):
            overlay.unbind(window)


if __name__ == '__main__':
    unittest.main()
