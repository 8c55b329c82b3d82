"""
API logger tests.
"""

import logging

from moviedb_api.logging_config import request_id_var, set_request_id, setup_api_logger


def test_api_logger_writes_request_id_to_config_log_dir(config):
    logger = setup_api_logger(config, name="moviedb_api_request_ids")

    set_request_id("abc12345")
    try:
        logger.info("lookup served")
    finally:
        request_id_var.set(None)
    logger.info("outside a request")

    log_files = list(config.log_dir.glob("moviedb_api_request_ids_*.log"))
    assert len(log_files) == 1
    text = log_files[0].read_text()
    assert "[abc12345] - lookup served" in text
    assert "[-] - outside a request" in text


def test_debug_flag_lowers_level(config):
    config.api_debug = True
    logger = setup_api_logger(config, name="moviedb_api_debug_level")

    assert logger.level == logging.DEBUG
