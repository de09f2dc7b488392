import pytest
import requests

from kuroneko.configuration import ConfigError, DictConfig
from kuroneko.data import DetailRecord
from kuroneko.errors import TrackingApiFailure, TrackingNetworkFailure
from kuroneko.service import YamatoService

from .pages import BATCH_PAGE, SINGLE_PAGE

def test_build_form():
    form = YamatoService().build_form(['12345678903', '12345678914'])
    assert form == {'number00': '1', 'number01': '12345678903', 'number02': '12345678914'}
    assert list(form) == ['number00', 'number01', 'number02']

def test_build_form_limit():
    with pytest.raises(ValueError):
        YamatoService().build_form(['1'] * 11)

def test_parse_single():
    block = YamatoService().parse_single(SINGLE_PAGE)
    assert block.label is None
    assert block.headers == ['伝票番号 1234-5678-9013', '配達完了']
    assert block.rows == [
        DetailRecord('荷物受付', '10/18', '09:15', '新宿センター', '032990'),
        DetailRecord('配達完了', '', '', '東京支店', '001'),
    ]

def test_parse_batch():
    first, second = YamatoService().parse_batch(BATCH_PAGE)
    assert first.label == '1件目'
    assert first.headers == ['伝票番号 1234-5678-9013', '配達完了']
    assert first.rows == [DetailRecord('配達完了', '10/19', '12:34', '東京支店', '001')]
    assert second.label is None
    assert second.headers == ['伝票番号 1234-5678-9024', '伝票番号未登録']
    assert second.rows == []
    assert not second.has_detail

def test_short_rows_are_padded():
    html = '<table class="meisai"><tr><td>h</td></tr><tr><td>1</td><td>発送</td></tr></table>'
    block = YamatoService().parse_single(html)
    assert block.rows == [DetailRecord('発送', '', '', '', '')]

def test_track_decodes_shift_jis(fake_post):
    post = fake_post(SINGLE_PAGE)
    result = YamatoService().track(['123456789013'])
    assert result.tracking_numbers == ['123456789013']
    assert len(result.blocks) == 1
    assert result.blocks[0].rows[0].location == '新宿センター'
    url, data, kwargs = post.calls[0]
    assert url == 'http://toi.kuronekoyamato.co.jp/cgi-bin/tneko'
    assert data == {'number00': '1', 'number01': '123456789013'}
    assert kwargs['timeout'] == 10.0

def test_track_batch(fake_post):
    fake_post(BATCH_PAGE)
    result = YamatoService().track(['12345678903', '12345678914'], batch=True)
    assert [b.label for b in result.blocks] == ['1件目', None]

def test_config_overrides_defaults(fake_post):
    post = fake_post(SINGLE_PAGE)
    config = DictConfig({'Yamato': {'url': 'http://localhost/tneko', 'timeout': '2.5'}})
    YamatoService(config).track(['123456789013'])
    url, _, kwargs = post.calls[0]
    assert url == 'http://localhost/tneko'
    assert kwargs['timeout'] == 2.5

def test_network_failure(fake_post):
    fake_post(error=requests.exceptions.ConnectionError('no route'))
    with pytest.raises(TrackingNetworkFailure):
        YamatoService().track(['123456789013'])

def test_api_failure(fake_post):
    fake_post('', status_code=500)
    with pytest.raises(TrackingApiFailure):
        YamatoService().track(['123456789013'])

def test_url():
    service = YamatoService()
    assert str(service) == 'Yamato'
    assert service.url('123456789013').endswith('number01=123456789013')

def test_url_follows_configured_service():
    config = DictConfig({'Yamato': {'url': 'http://localhost/tneko'}})
    assert YamatoService(config).url('123456789013') == \
        'http://localhost/tneko?number00=1&number01=123456789013'

def test_bad_timeout(fake_post):
    post = fake_post(SINGLE_PAGE)
    with pytest.raises(ConfigError):
        YamatoService(DictConfig({'Yamato': {'timeout': 'soon'}})).track(['123456789013'])
    assert post.calls == []
