"""Output decoration, passed explicitly to whatever needs it.
"""

import os

HI_YELLOW = '\x1b[93m'
RESET = '\x1b[0m'

class PlainFormatter(object):
    """Leaves all text as it is
    """
    def error(self, text):
        return text

    def count(self, text):
        return text

class ColorFormatter(PlainFormatter):
    """Highlights error messages and result counts with ANSI colors
    """
    def __init__(self, error_color=HI_YELLOW, count_color=HI_YELLOW):
        self.error_color = error_color
        self.count_color = count_color

    def _colorize(self, color, text):
        return '{0}{1}{2}'.format(color, text, RESET)

    def error(self, text):
        return self._colorize(self.error_color, text)

    def count(self, text):
        return self._colorize(self.count_color, text)

def use_color(stream, setting='auto'):
    """Decide whether to color output written to stream. setting is one of
    auto, always or never; auto colors terminals unless $NO_COLOR is set.
    """
    setting = (setting or 'auto').lower()
    if setting == 'always':
        return True
    if setting == 'never':
        return False
    if 'NO_COLOR' in os.environ:
        return False
    isatty = getattr(stream, 'isatty', None)
    return bool(isatty and isatty())

def formatter_for(stream, config):
    if use_color(stream, config.get_default('auto', 'Report', 'color')):
        return ColorFormatter()
    return PlainFormatter()
