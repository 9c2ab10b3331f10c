import pytest

import src.logging.config as log_config


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("info", "INFO"),
        ("DEBUG", "DEBUG"),
        ("1", "INFO"),
        ("2", "DEBUG"),
        ("", "INFO"),
        ("off", ""),
        ("0", ""),
        ("silent", ""),
        ("warn", "WARNING"),
        ("verbose", "INFO"),
        ("5", "INFO"),
    ],
)
def test_resolve_log_level(raw, expected):
    assert log_config.resolve_log_level(raw) == expected


def test_setup_logging_silent_adds_no_sink(monkeypatch, mocker):
    monkeypatch.setenv("LOG_LEVEL", "OFF")
    mock_logger = mocker.patch.object(log_config, "logger")
    add = mock_logger.add

    log_config.setup_logging()

    add.assert_not_called()


def test_setup_logging_lambda_uses_json(monkeypatch, mocker):
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("AWS_LAMBDA_FUNCTION_NAME", "wishes")
    mock_logger = mocker.patch.object(log_config, "logger")
    add = mock_logger.add

    log_config.setup_logging()

    assert add.call_args.kwargs["serialize"] is True
    assert add.call_args.kwargs["level"] == "INFO"


def test_setup_logging_local_is_colorized(monkeypatch, mocker):
    monkeypatch.setenv("LOG_LEVEL", "2")
    monkeypatch.delenv("AWS_LAMBDA_FUNCTION_NAME", raising=False)
    mock_logger = mocker.patch.object(log_config, "logger")
    add = mock_logger.add

    log_config.setup_logging()

    assert add.call_args.kwargs["colorize"] is True
    assert add.call_args.kwargs["level"] == "DEBUG"


def test_setup_logging_unknown_level_falls_back_to_info(monkeypatch, mocker):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    mock_logger = mocker.patch.object(log_config, "logger")
    add = mock_logger.add

    log_config.setup_logging()

    assert add.call_args.kwargs["level"] == "INFO"
