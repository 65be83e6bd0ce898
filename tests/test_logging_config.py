import io
import logging
from utils.logging_config import get_logger, setup_logging


def test_setup_logging_writes_to_given_stream():
    stream = io.StringIO()
    setup_logging(level=logging.INFO, stream=stream)
    get_logger("formula_order.test").info("hello")
    get_logger("formula_order.test").debug("hidden")
    output = stream.getvalue()
    assert "[INFO] formula_order.test: hello" in output
    assert "hidden" not in output


def test_setup_logging_replaces_its_own_handlers(tmp_path):
    root = logging.getLogger()
    setup_logging(stream=io.StringIO())
    before = len(root.handlers)
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file), stream=io.StringIO())
    assert len(root.handlers) == before + 1
    get_logger("formula_order.test").debug("to file")
    setup_logging(stream=io.StringIO())
    assert len(root.handlers) == before
    assert "to file" in log_file.read_text()


def test_get_logger_defers_to_root():
    assert get_logger("formula_order.other").level == logging.NOTSET
