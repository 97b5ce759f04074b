import unittest, logging, sys

class _BufferingHandler(logging.Handler):
    def __init__(self, *args):
        super().__init__(*args)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def _problem_count(result) -> int:
    # pytest hands its own result object to run(), which has no failure lists
    return len(getattr(result, 'failures', ())) + len(getattr(result, 'errors', ()))


class LoggedTestCase(unittest.TestCase):
    """Test case which buffers log records from the test and the code under test, only printing them if the test fails"""
    captured_loggers = ('interactive',)

    def setUp(self):
        super().setUp()
        self.logger = logging.getLogger(f'test.{self.id()}')
        self.logger.setLevel(logging.DEBUG)
        self.logbuf = _BufferingHandler()
        self._watched = [self.logger] + [logging.getLogger(n) for n in self.captured_loggers]
        self._saved_levels = [l.level for l in self._watched]
        for l in self._watched:
            l.addHandler(self.logbuf)
            l.setLevel(logging.DEBUG)

    def tearDown(self):
        super().tearDown()
        for l, level in zip(self._watched, self._saved_levels):
            l.removeHandler(self.logbuf)
            l.setLevel(level)

    def run(self, result=None):
        before = _problem_count(result)
        outcome = super().run(result)
        if hasattr(self, 'logbuf') and result is not None and _problem_count(result) > before:
            sh = logging.StreamHandler(sys.stdout)
            sh.setFormatter(logging.Formatter('%(name)s %(levelname)s: %(message)s'))
            for r in self.logbuf.records:
                sh.emit(r)
        return outcome
