"""Tests for the command line entry point and logging setup."""

import logging

import pytest

from storefront import main as main_module
from storefront.logging_config import setup_logging


# Fixtures

@pytest.fixture
def restore_logger():
    package_logger = logging.getLogger("storefront")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    yield package_logger
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate


class TestParser:
    def test_defaults(self):
        args = main_module.build_parser().parse_args([])

        assert args.catalog is None
        assert args.order_url is None
        assert args.debug is False

    def test_all_options(self):
        args = main_module.build_parser().parse_args(
            ["--catalog", "menu.json", "--order-url", "http://orders.test/post", "--log-file", "x.log", "--debug"]
        )

        assert args.catalog == "menu.json"
        assert args.order_url == "http://orders.test/post"
        assert args.log_file == "x.log"
        assert args.debug is True


class TestSetupLogging:
    def test_writes_records_to_file(self, tmp_path, restore_logger):
        log_file = setup_logging(tmp_path / "logs" / "debug.log", enable_debug=True)
        logging.getLogger("storefront.cart").debug("order_submit items=1")
        for handler in restore_logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "storefront.cart - order_submit items=1" in content
        assert "[DEBUG   ]" in content

    def test_info_level_drops_debug(self, tmp_path, restore_logger):
        log_file = setup_logging(tmp_path / "debug.log")
        logging.getLogger("storefront.filters").debug("hidden")
        for handler in restore_logger.handlers:
            handler.flush()

        assert "hidden" not in log_file.read_text(encoding="utf-8")
        assert restore_logger.level == logging.INFO

    def test_repeat_setup_replaces_handler(self, tmp_path, restore_logger):
        setup_logging(tmp_path / "a.log")
        setup_logging(tmp_path / "b.log")

        assert len(restore_logger.handlers) == 1
        assert restore_logger.propagate is False


class TestMain:
    def test_runs_app_with_cli_options(self, tmp_path, monkeypatch, restore_logger):
        launched = {}

        class FakeApp:
            def __init__(self, products=None, order_client=None):
                launched["products"] = products
                launched["order_client"] = order_client

            def run(self):
                launched["ran"] = True

        monkeypatch.setattr(main_module, "StorefrontApp", FakeApp)
        main_module.main(["--order-url", "http://orders.test/post", "--log-file", str(tmp_path / "run.log")])

        assert launched["ran"] is True
        assert launched["products"] is None
        assert launched["order_client"].endpoint_url == "http://orders.test/post"
