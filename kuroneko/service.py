import logging

import requests
from bs4 import BeautifulSoup

from .configuration import ConfigError, ConfigKeyError, DictConfig, NullConfig
from .data import DetailRecord, ShipmentBlock, TrackingResult
from .errors import TrackingApiFailure, TrackingNetworkFailure

log = logging.getLogger(__name__)

class YamatoService(object):
    """Talks to the Yamato Transport tracking CGI, which accepts up to ten
    tracking numbers per request and answers with Shift_JIS encoded HTML.
    """
    SHORT_NAME = 'Yamato'
    CONFIG_NS = SHORT_NAME
    DEFAULT_CFG = DictConfig({CONFIG_NS: {
        'url': 'http://toi.kuronekoyamato.co.jp/cgi-bin/tneko',
        'timeout': '10',
        'encoding': 'cp932',
        'parser': 'lxml',
    }})
    MAX_NUMBERS = 10

    def __init__(self, config=None):
        self._config = NullConfig() if config is None else config

    def __str__(self):
        return self.SHORT_NAME

    def url(self, tracking_number):
        """The result page for tracking_number, as a GET URL on the configured
        service
        """
        return requests.Request('GET', self._cfg_value('url'),
            params=self.build_form([tracking_number])).prepare().url

    def track(self, tracking_numbers, batch=False):
        """Look up tracking_numbers in one request, returns a TrackingResult.

        In batch mode every shipment on the result page becomes its own
        block, otherwise the whole page is read as a single block.
        """
        html = self.fetch(tracking_numbers)
        if batch:
            blocks = self.parse_batch(html)
        else:
            blocks = [self.parse_single(html)]
        return TrackingResult(tracking_numbers, blocks)

    def build_form(self, tracking_numbers):
        if len(tracking_numbers) > self.MAX_NUMBERS:
            raise ValueError('At most {0} tracking numbers per request, got {1}'.format(
                self.MAX_NUMBERS, len(tracking_numbers)))
        form = {'number00': '1'}
        for i, tracking_number in enumerate(tracking_numbers, 1):
            form['number{0:02d}'.format(i)] = tracking_number
        return form

    def fetch(self, tracking_numbers):
        """POST the tracking numbers and return the decoded response body
        """
        url = self._cfg_value('url')
        log.debug('Requesting %s for %s', url, ', '.join(tracking_numbers))
        try:
            resp = requests.post(url, data=self.build_form(tracking_numbers),
                timeout=self._cfg_float('timeout'))
        except requests.exceptions.RequestException as err:
            raise TrackingNetworkFailure(err)
        try:
            resp.raise_for_status()
        except requests.exceptions.HTTPError as err:
            raise TrackingApiFailure(err)
        return resp.content.decode(self._cfg_value('encoding'), 'replace')

    def parse_single(self, html):
        return self._parse_block(self._soup(html))

    def parse_batch(self, html):
        return [self._parse_block(node) for node in self._soup(html).select('center')]

    def _soup(self, html):
        return BeautifulSoup(html, self._cfg_value('parser'))

    def _parse_block(self, node):
        block = ShipmentBlock()
        for cell in node.select('.saisin td'):
            classes = cell.get('class') or []
            text = cell.get_text(strip=True)
            if 'number' in classes:
                block.label = text
            if 'bold' in classes or 'font14' in classes:
                block.headers.append(text)

        # the first row holds the column titles
        for row in node.select('.meisai tr')[1:]:
            cells = [td.get_text(strip=True) for td in row.find_all('td')]
            block.rows.append(self._parse_detail(cells))
        return block

    def _parse_detail(self, cells):
        # cells[0] is the row number
        values = cells[1:6]
        values += [''] * (len(DetailRecord._fields) - len(values))
        return DetailRecord(*values)

    def _cfg_float(self, *keys):
        value = self._cfg_value(*keys)
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ConfigError('Invalid value for {ns}.{keys}: {value!r}'.format(
                ns=self.CONFIG_NS, keys='.'.join(keys), value=value))

    def _cfg_value(self, *keys):
        """Return the config value for this service, looked up with {keys}.
        If the value is not found, the DEFAULT_CFG is fallen back to, then
        a ConfigKeyError is raised if still not found.
        """
        try:
            value = self._config.get_value(self.CONFIG_NS, *keys)
        except ConfigKeyError as err:
            try:
                value = self.DEFAULT_CFG.get_value(self.CONFIG_NS, *keys)
            except ConfigKeyError:
                raise err
        return value
