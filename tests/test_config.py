import io

from loguru import logger

from bidguard.config import DEFAULT_LOG_FORMAT, Settings, load_settings, setup_logging


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.delenv("BIDGUARD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("BIDGUARD_LOG_FORMAT", raising=False)
    empty = tmp_path / ".env"
    empty.write_text("")

    settings = load_settings(env_path=empty)
    assert settings == Settings(log_level="INFO", log_format=DEFAULT_LOG_FORMAT)


def test_env_file_is_read(monkeypatch, tmp_path):
    monkeypatch.delenv("BIDGUARD_LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("BIDGUARD_LOG_LEVEL=debug\n")

    settings = load_settings(env_path=env_file)
    assert settings.log_level == "DEBUG"
    monkeypatch.delenv("BIDGUARD_LOG_LEVEL", raising=False)


def test_environment_wins_over_env_file(monkeypatch, tmp_path):
    monkeypatch.setenv("BIDGUARD_LOG_LEVEL", "WARNING")
    env_file = tmp_path / ".env"
    env_file.write_text("BIDGUARD_LOG_LEVEL=DEBUG\n")

    assert load_settings(env_path=env_file).log_level == "WARNING"


def test_setup_logging_uses_level_and_format():
    sink = io.StringIO()
    handler_id = setup_logging(Settings(log_level="WARNING", log_format="{level}|{message}"), sink=sink)
    try:
        logger.info("hidden")
        logger.warning("shown")
    finally:
        logger.remove(handler_id)

    output = sink.getvalue()
    assert "hidden" not in output
    assert "WARNING|shown" in output
