"""
Test bootstrap:
- Provide a client whose session never reaches the network
- Expose the recorded transport calls to tests
"""
import logging

import pytest

from gitlab_rest import ClientConfig, GitLabClient
from helpers.mocks import BASE_URL, TOKEN, RecordingSend


@pytest.fixture
def send():
    """Fake ``Session.send``; queue results on ``send.results``."""
    return RecordingSend()


@pytest.fixture
def client(send, monkeypatch):
    """A GitLabClient wired to the fake transport."""
    gl = GitLabClient(ClientConfig(base_url=BASE_URL, token=TOKEN))
    monkeypatch.setattr(gl._session, "send", send)
    yield gl
    gl.close()


@pytest.fixture
def debug_logs(caplog):
    """Capture client log output at DEBUG."""
    caplog.set_level(logging.DEBUG, logger="gitlab_rest")
    return caplog
