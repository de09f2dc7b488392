"""Consecutive tracking numbers.

Yamato hands out tracking numbers in runs, so the parcels shipped together
usually carry consecutive base values. Starting from a base value, the
candidates are every following base value with its own check digit
appended, zero padded to the width of the original tracking number:

    >>> from kuroneko.candidates import generate_candidates, take
    >>> take(generate_candidates('1234567890'), 3)
    ['12345678903', '12345678914', '12345678925']

CandidateSequence runs the producer in a worker thread that hands each value
over through a single slot queue, so nothing is computed far ahead of the
consumer. iter_candidates() is the same sequence as a plain generator.
"""

import logging
import queue
import threading

from .tracking_number import compute_check_digit

log = logging.getLogger(__name__)

SHORT_WIDTH = 11
LONG_WIDTH = 12

def digit_width_for(base_digits):
    """Width of the full tracking numbers generated from base_digits: 11 for a
    10 digit base (from an 11 digit tracking number), 12 otherwise
    """
    return SHORT_WIDTH if len(base_digits) == SHORT_WIDTH - 1 else LONG_WIDTH

def candidate(value, width):
    """The tracking number for base value, check digit included, zero padded
    to width
    """
    return (str(value) + compute_check_digit(value)).zfill(width)

def iter_candidates(base_digits, digit_width=None):
    if digit_width is None:
        digit_width = digit_width_for(base_digits)
    value = int(base_digits)
    while True:
        yield candidate(value, digit_width)
        value += 1

class CandidateSequence(object):
    """An endless, cancellable run of candidate tracking numbers.

    Values are produced by a daemon thread, in strictly increasing order, and
    passed to the consumer through a queue holding a single item. The
    producer checks the cancellation flag before computing each value, so
    after cancel() it stops within one step and at most one value already in
    the queue can still be read.
    """

    # how long blocking queue operations wait before rechecking the
    # cancellation flag, in seconds
    poll_interval = 0.05

    def __init__(self, base_digits, digit_width=None):
        if digit_width is None:
            digit_width = digit_width_for(base_digits)
        self.base_digits = base_digits
        self.digit_width = digit_width
        self._queue = queue.Queue(maxsize=1)
        self._cancelled = threading.Event()
        self._thread = None

    def __repr__(self):
        return '<CandidateSequence(base_digits={s.base_digits!r}, ' \
            'digit_width={s.digit_width!r}, cancelled={s.cancelled!r})>'.format(s=self)

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc_value, traceback):
        self.cancel()

    def __iter__(self):
        return self

    def __next__(self):
        return self.get()

    @property
    def cancelled(self):
        return self._cancelled.is_set()

    @property
    def running(self):
        return self._thread is not None and self._thread.is_alive()

    def start(self):
        """Start the producer thread, does nothing if it was already started
        or the sequence is cancelled
        """
        if self._thread is None and not self.cancelled:
            self._thread = threading.Thread(target=self._produce,
                name='kuroneko-candidates-{0}'.format(self.base_digits))
            self._thread.daemon = True
            self._thread.start()
            log.debug('Started candidate producer at %s', self.base_digits)
        return self

    def get(self):
        """Return the next candidate, blocking until the producer hands it
        over. Raises StopIteration once the sequence is cancelled and any
        pending value has been read.
        """
        self.start()
        while True:
            try:
                return self._queue.get(timeout=self.poll_interval)
            except queue.Empty:
                if self.cancelled:
                    break
        # a value may have been queued between the timeout and the check
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            raise StopIteration

    def take(self, n):
        """Return the next n candidates in order, then cancel the sequence
        """
        try:
            if n < 0:
                raise ValueError('Cannot take a negative number of candidates: {0}'.format(n))
            return [self.get() for _ in range(n)]
        finally:
            self.cancel()

    def cancel(self, timeout=1.0):
        """Stop the producer and wait up to timeout seconds for its thread to
        exit. Cancelling more than once is harmless.
        """
        self._cancelled.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _produce(self):
        value = int(self.base_digits)
        while not self._cancelled.is_set():
            item = candidate(value, self.digit_width)
            while not self._cancelled.is_set():
                try:
                    self._queue.put(item, timeout=self.poll_interval)
                except queue.Full:
                    continue
                break
            value += 1
        log.debug('Candidate producer for %s stopped at %d',
            self.base_digits, value)

def generate_candidates(base_digits, digit_width=None):
    """Return a started CandidateSequence for base_digits
    """
    return CandidateSequence(base_digits, digit_width).start()

def take(sequence, n):
    return sequence.take(n)

def cancel(sequence):
    sequence.cancel()
