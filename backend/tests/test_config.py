import logging
from pathlib import Path

from jobsearch.config import Settings
from jobsearch.logging_config import configure_logging


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("JOBSEARCH_DATA_PATH", raising=False)
        monkeypatch.delenv("JOBSEARCH_API_PREFIX", raising=False)
        s = Settings()
        assert s.data_path == Path.home() / "JobSearch"
        assert s.api_prefix == "/api/v1"
        assert s.echo_sql is False

    def test_db_path_lives_under_data_path(self, tmp_path):
        s = Settings(data_path=tmp_path)
        assert s.db_path == tmp_path / "jobsearch.sqlite"

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("JOBSEARCH_DATA_PATH", str(tmp_path))
        monkeypatch.setenv("JOBSEARCH_LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.data_path == tmp_path
        assert s.log_level == "DEBUG"


class TestLogging:
    def test_configure_logging_installs_one_handler(self):
        configure_logging("DEBUG")
        logger = configure_logging("warning")
        assert logger is logging.getLogger("jobsearch")
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
