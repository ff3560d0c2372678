"""
测试配置加载与日志初始化。
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from mastra_otlp.core.config import ExporterConfig, parse_headers
from mastra_otlp.utils.logger import setup_logging

ENV_KEYS = [
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_HEADERS",
    "OTEL_EXPORTER_OTLP_PROTOCOL",
    "OTEL_EXPORTER_OTLP_TIMEOUT",
    "OTEL_SERVICE_NAME",
]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so values loaded from .env files are removed on teardown
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    return monkeypatch


class TestParseHeaders:

    def test_empty(self):
        assert parse_headers(None) == {}
        assert parse_headers("") == {}

    def test_pairs(self):
        assert parse_headers("x-integration-token=abc, api-key = k1") == {
            "x-integration-token": "abc",
            "api-key": "k1",
        }

    def test_url_decoded(self):
        assert parse_headers("Authorization=Bearer%20tok") == {"Authorization": "Bearer tok"}

    def test_value_with_equals(self):
        assert parse_headers("sig=a=b") == {"sig": "a=b"}

    def test_malformed_skipped(self):
        assert parse_headers("novalue,=x,ok=1") == {"ok": "1"}


class TestExporterConfig:

    def test_defaults(self):
        config = ExporterConfig()
        assert config.endpoint == ""
        assert config.has_endpoint is False
        assert config.service_name == "mastra-app"
        assert config.protocol == "http/json"
        assert config.headers == {}
        assert config.timeout is None

    def test_from_env(self, clean_env, tmp_path):
        clean_env.setenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT", " http://collector:4318/v1/traces ")
        clean_env.setenv("OTEL_EXPORTER_OTLP_HEADERS", "x-integration-token=96ab")
        clean_env.setenv("OTEL_SERVICE_NAME", "browsing-agent")
        clean_env.setenv("OTEL_EXPORTER_OTLP_TIMEOUT", "1500")

        config = ExporterConfig.from_env(str(tmp_path / "missing.env"))
        assert config.endpoint == "http://collector:4318/v1/traces"
        assert config.has_endpoint is True
        assert config.headers == {"x-integration-token": "96ab"}
        assert config.service_name == "browsing-agent"
        assert config.timeout == 1.5
        assert config.protocol == "http/json"

    def test_generic_endpoint_fallback(self, clean_env, tmp_path):
        clean_env.setenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://fallback")
        assert ExporterConfig.from_env(str(tmp_path / "missing.env")).endpoint == "http://fallback"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT=http://from-file\n"
            "OTEL_SERVICE_NAME=from-file\n"
        )
        clean_env.setenv("OTEL_SERVICE_NAME", "from-env")

        config = ExporterConfig.from_env(str(env_file))
        assert config.endpoint == "http://from-file"
        assert config.service_name == "from-env"

    def test_nothing_configured(self, clean_env, tmp_path):
        config = ExporterConfig.from_env(str(tmp_path / "missing.env"))
        assert config.has_endpoint is False
        assert config.service_name == "mastra-app"

    def test_summary_masks_headers(self):
        config = ExporterConfig(endpoint="http://x", headers={"x-integration-token": "96ab041e-8a6a"})
        text = config.summary()
        assert "http://x" in text
        assert "x-integration-token=96ab..." in text
        assert "8a6a" not in text


class TestSetupLogging:

    @pytest.fixture(autouse=True)
    def restore_package_logger(self):
        pkg = logging.getLogger("mastra_otlp")
        aio = logging.getLogger("asyncio")
        saved = (pkg.handlers[:], pkg.level, pkg.propagate, aio.level)
        yield pkg
        for h in pkg.handlers[:]:
            if h not in saved[0]:
                pkg.removeHandler(h)
                h.close()
        pkg.setLevel(saved[1])
        pkg.propagate = saved[2]
        aio.setLevel(saved[3])

    def test_configures_package_not_root(self):
        root = logging.getLogger()
        root_handlers, root_level = root.handlers[:], root.level

        logger = setup_logging()

        assert logger.name == "mastra_otlp"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert root.handlers == root_handlers
        assert root.level == root_level

    def test_debug_shows_transport_success_line(self):
        setup_logging(debug=True)
        transport_logger = logging.getLogger("mastra_otlp.otlp.transport")
        assert transport_logger.isEnabledFor(logging.DEBUG)
        assert logging.getLogger("asyncio").level == logging.DEBUG

    def test_info_hides_debug_keeps_error_dump(self):
        setup_logging()
        transport_logger = logging.getLogger("mastra_otlp.otlp.transport")
        assert not transport_logger.isEnabledFor(logging.DEBUG)
        assert transport_logger.isEnabledFor(logging.ERROR)
        assert logging.getLogger("asyncio").level == logging.WARNING

    def test_repeat_call_replaces_handlers(self, restore_package_logger):
        before = len(restore_package_logger.handlers)
        setup_logging()
        setup_logging()
        assert len(restore_package_logger.handlers) == before + 1

    def test_file_handler(self, tmp_path, restore_package_logger):
        log_file = tmp_path / "logs" / "export.log"
        logger = setup_logging(log_file=str(log_file))
        logging.getLogger("mastra_otlp.exporters.otel").warning("otel-exporter disabled: test")

        handlers = [h for h in restore_package_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(handlers) == 1
        handlers[0].flush()
        assert "mastra_otlp.exporters.otel | WARNING | otel-exporter disabled: test" in log_file.read_text(encoding="utf-8")
        assert logger is restore_package_logger
