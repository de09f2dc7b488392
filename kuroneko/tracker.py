import logging

from .candidates import generate_candidates, take
from .errors import UsageError
from .formatting import PlainFormatter
from .report import DETAIL_LAYOUT, render
from .tracking_number import split, validate

log = logging.getLogger(__name__)

MIN_SERIAL = 1
MAX_SERIAL = 10
SERIAL_RANGE_MESSAGE = '連番で取得できるのは {0}~{1}件 までです'.format(MIN_SERIAL, MAX_SERIAL)

class Single(object):
    """Look up exactly the tracking number given, as typed
    """
    batch = False
    always_close = True

    def __repr__(self):
        return '<Single()>'

    def tracking_numbers(self, tracking_number):
        return [tracking_number]

class Batch(object):
    """Look up count consecutive tracking numbers, starting with the one
    given
    """
    batch = True
    always_close = False

    def __init__(self, count):
        if count < MIN_SERIAL or count > MAX_SERIAL:
            raise UsageError(SERIAL_RANGE_MESSAGE)
        self.count = count

    def __repr__(self):
        return '<Batch(count={0!r})>'.format(self.count)

    def tracking_numbers(self, tracking_number):
        base_digits, _ = split(validate(tracking_number))
        return take(generate_candidates(base_digits), self.count)

def request_mode(serial=None):
    """Single when no serial count was asked for, Batch otherwise
    """
    if serial is None:
        return Single()
    return Batch(serial)

class Tracker(object):
    """Ties validation, candidate generation, the tracking service and the
    report renderer together
    """

    def __init__(self, service, formatter=None, layout=DETAIL_LAYOUT):
        self.service = service
        self.formatter = PlainFormatter() if formatter is None else formatter
        self.layout = layout

    def track(self, tracking_number, mode=None):
        """Track tracking_number in the given mode and return the rendered
        report. Validation errors are raised before anything is sent.
        """
        if mode is None:
            mode = Single()
        numbers = mode.tracking_numbers(tracking_number)
        log.debug('Tracking %s (%r), see %s', ', '.join(numbers), mode,
            self.service.url(numbers[0]))
        result = self.service.track(numbers, batch=mode.batch)
        return render(result.blocks, self.layout,
            label_format=self.formatter.count,
            always_close=mode.always_close)
