"""Fixed width text rendering of tracking results.

Rows are laid out column by column. A column with a width is padded with
full-width spaces (U+3000) up to that many characters, so Japanese status
and branch names line up with each other. Widths are counted in code points
rather than terminal cells, which means a row mixing ASCII and wide text
still drifts in a real terminal; the output format depends on that count so
it is kept as is.

    >>> from kuroneko.data import DetailRecord
    >>> from kuroneko.report import DETAIL_LAYOUT, render_row
    >>> render_row(DetailRecord('配達完了', '10/19', '12:34', '東京支店', '001'),
    ...     DETAIL_LAYOUT)
    ' 配達完了　　　　　　　　　　　| 10/19 | 12:34 | 東京支店　　　　　　　　　　　　　　　　| 001 |'

The functions here are pure: the same records and layout always render to
the same text.
"""

from collections import namedtuple
from collections.abc import Mapping

from .data import ShipmentBlock

FULL_WIDTH_SPACE = '　'
# same width as "10/19" or "12:34"
BLANK_PLACEHOLDER = ' ' * 5
RULE_CHAR = '-'
DEFAULT_RULE_WIDTH = 99
LEGACY_RULE_WIDTH = 90

class Column(namedtuple('Column', 'index width placeholder name')):
    """A single column of a row: which field of the record it shows, the
    width it is padded to (None for no padding), and the text shown instead
    of an empty value (None to leave it empty).
    """
    __slots__ = ()

    def __new__(cls, index, width=None, placeholder=None, name=None):
        return super(Column, cls).__new__(cls, index, width, placeholder, name)

class Layout(object):
    """How records are arranged into rows, and how wide the rule closing each
    shipment is
    """

    def __init__(self, columns, rule_width=DEFAULT_RULE_WIDTH, rule_char=RULE_CHAR):
        self.columns = tuple(columns)
        self.rule_width = rule_width
        self.rule_char = rule_char

    def __repr__(self):
        return '<Layout(columns={0!r}, rule_width={1!r})>'.format(
            [c.name or c.index for c in self.columns], self.rule_width)

    def with_rule_width(self, rule_width):
        """Return a copy of this layout with a different rule width
        """
        return Layout(self.columns, rule_width, self.rule_char)

DETAIL_LAYOUT = Layout([
    Column(0, 15, name='status'),
    Column(1, placeholder=BLANK_PLACEHOLDER, name='date'),
    Column(2, placeholder=BLANK_PLACEHOLDER, name='time'),
    Column(3, 20, name='location'),
    Column(4, name='code'),
])

ITEM_LAYOUT = Layout([
    Column(0, 15, name='item'),
    Column(1, placeholder=BLANK_PLACEHOLDER, name='date'),
    Column(2, 20, name='name'),
], rule_width=LEGACY_RULE_WIDTH)

def display_width(text):
    """The width used for alignment: the number of code points in text.
    Wide East Asian characters count as one.
    """
    return len(text)

def make_space(count):
    return FULL_WIDTH_SPACE * max(count, 0)

def pad(text, width):
    """Append full-width spaces to text up to width characters, text longer
    than width is left untouched
    """
    return text + make_space(width - display_width(text))

def field(record, column):
    """Return the value column shows from record, or an empty string if the
    record lacks it or holds None. Mappings are looked up by the column name,
    sequences by its index.
    """
    key = column.index
    if isinstance(record, Mapping) and column.name is not None:
        key = column.name
    try:
        value = record[key]
    except (IndexError, KeyError):
        return ''
    return '' if value is None else value

def render_cell(record, column):
    value = field(record, column)
    if not value and column.placeholder is not None:
        value = column.placeholder
    if column.width is None:
        return value + ' |'
    return pad(value, column.width) + '|'

def render_row(record, layout):
    return ' ' + ' '.join(render_cell(record, column) for column in layout.columns)

def render_rows(records, layout):
    return ''.join(render_row(record, layout) + '\n' for record in records)

def render_rule(layout):
    return layout.rule_char * layout.rule_width

def render_header(text):
    return ' {0}\n'.format(text)

def render_block(block, layout, label_format=None, always_close=False):
    """Render one shipment: its label and header lines, then, if the block
    has any detail (or always_close is set), a blank line, the detail rows
    and the closing rule.
    """
    lines = []
    if block.label:
        label = block.label if label_format is None else label_format(block.label)
        lines.append(render_header(label))
    lines.extend(render_header(text) for text in block.headers)
    closed = always_close or block.has_detail
    if closed:
        lines.append('\n')
    lines.append(render_rows(block.rows, layout))
    if closed:
        lines.append(render_rule(layout) + '\n')
    return ''.join(lines)

def render(blocks, layout, label_format=None, always_close=False):
    """Render a whole report.

    blocks is a sequence of ShipmentBlock objects; a sequence of plain
    records is rendered as a single block without headers.
    """
    blocks = list(blocks)
    if blocks and not all(isinstance(b, ShipmentBlock) for b in blocks):
        blocks = [ShipmentBlock(rows=blocks)]
    return ''.join(render_block(block, layout, label_format, always_close)
        for block in blocks)
