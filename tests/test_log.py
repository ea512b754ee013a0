import logging

import pytest

from worksphere.log import NOISY_LOGGERS, configure_logging

@pytest.fixture()
def bare_root():
    root = logging.getLogger()
    saved = root.handlers[:], root.level
    root.handlers = []
    try:
        yield root
    finally:
        root.handlers, level = saved
        root.setLevel(level)
        for name in ("worksphere", *NOISY_LOGGERS):
            logging.getLogger(name).setLevel(logging.NOTSET)

def test_quiets_http_request_logs(bare_root):
    configure_logging("debug")

    assert bare_root.handlers
    assert logging.getLogger("worksphere").level == logging.DEBUG
    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING

def test_second_call_only_changes_level(bare_root):
    configure_logging("INFO")
    handlers = list(bare_root.handlers)

    configure_logging("WARNING")
    assert bare_root.handlers == handlers
    assert logging.getLogger("worksphere").level == logging.WARNING
