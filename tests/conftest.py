import pytest
import requests

class FakeResponse(object):
    def __init__(self, text, status_code=200, encoding='cp932'):
        self.content = text.encode(encoding)
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError('{0} Error'.format(self.status_code))

class FakePost(object):
    """Stands in for requests.post, remembering every call"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def __call__(self, url, data=None, **kwargs):
        self.calls.append((url, data, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

@pytest.fixture
def fake_post(monkeypatch):
    def install(text='', status_code=200, error=None):
        post = FakePost(FakeResponse(text, status_code), error)
        monkeypatch.setattr('kuroneko.service.requests.post', post)
        return post
    return install
