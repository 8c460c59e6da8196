import logging

import pytest

from streamstore_api.app.core.logging_config import CONSOLE_HANDLER, FILE_HANDLER, setup_logging

OURS = {CONSOLE_HANDLER, FILE_HANDLER}


@pytest.fixture
def root_logger():
    """Root logger stripped of the app's handlers, restored afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = [h for h in saved_handlers if h.get_name() not in OURS]
    yield root
    for handler in root.handlers:
        if handler.get_name() in OURS:
            handler.close()
    root.handlers = saved_handlers
    root.setLevel(saved_level)


def _ours(root):
    return [h for h in root.handlers if h.get_name() in OURS]


def test_file_handler_creates_log_directory(root_logger, tmp_path):
    logfile = tmp_path / "logs" / "api.log"
    setup_logging("warning", str(logfile))

    logging.getLogger("streamstore.test").warning("catalog updated")
    for handler in _ours(root_logger):
        handler.flush()

    assert root_logger.level == logging.WARNING
    assert "[WARNING] streamstore.test: catalog updated" in logfile.read_text(encoding="utf-8")


def test_setup_runs_once(root_logger, tmp_path):
    setup_logging("INFO", str(tmp_path / "api.log"))
    setup_logging("DEBUG", str(tmp_path / "other.log"))
    assert sorted(h.get_name() for h in _ours(root_logger)) == sorted(OURS)
    assert root_logger.level == logging.INFO
    assert not (tmp_path / "other.log").exists()


def test_foreign_handlers_do_not_block_setup(root_logger):
    root_logger.addHandler(logging.NullHandler())
    setup_logging("INFO")
    assert [h.get_name() for h in _ours(root_logger)] == [CONSOLE_HANDLER]


def test_debug_flag_forces_debug_level(root_logger):
    setup_logging("verbose", debug=True)
    assert root_logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("verbose")
    assert root_logger.level == logging.INFO
