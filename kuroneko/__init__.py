"""Track Yamato Transport (kuroneko) parcels.

Basic usage:

    >>> from kuroneko import validate, generate_candidates, take
    # Check a tracking number, hyphens are allowed
    >>> validate('1234-5678-9013')
    '123456789013'
    # The next tracking numbers in the same run
    >>> take(generate_candidates('1234567890'), 3)
    ['12345678903', '12345678914', '12345678925']
    # Fetch and render the status of a parcel (needs network access)
    >>> from kuroneko import Tracker, Batch
    >>> from kuroneko.service import YamatoService
    >>> print(Tracker(YamatoService()).track('1234-5678-9013', Batch(2)))

From the command line:

    $ kuroneko 1234-5678-9013
    $ kuroneko -s 5 1234-5678-9013

Configuration:

Settings are read from ~/.kuroneko (or the file named by $KURONEKO_CONFIG),
which looks like this. Every value is optional.

    [Yamato]
    url = http://toi.kuronekoyamato.co.jp/cgi-bin/tneko
    timeout = 10
    encoding = cp932

    [Report]
    rule_width = 99
    color = auto

    [kuroneko]
    log_level = WARNING
"""

__credits__     = ['kuroneko developers']
__authors__     = ', '.join(__credits__)
__license__     = 'GPL'
__maintainer__  = __credits__[0]
__status__      = 'Development'
__version__     = '0.5'

from .errors import (KuronekoError, InvalidTrackingNumber, InvalidCharacter,
    InvalidLength, ChecksumMismatch, TrackingFailure)
from .tracking_number import (normalize, validate, compute_check_digit,
    verify_check_digit)
from .candidates import CandidateSequence, generate_candidates, take, cancel
from .report import Column, Layout, DETAIL_LAYOUT, ITEM_LAYOUT, render
from .tracker import Tracker, Single, Batch

