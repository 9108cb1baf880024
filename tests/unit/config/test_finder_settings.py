import pytest

from pidfinder.config import ConfigurationError, FinderSettings, get_finder_settings, runtime


def test_defaults():
    assert get_finder_settings() == FinderSettings(proc_root="/proc", backend="procfs", log_level="WARNING")


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PIDFINDER_PROC_ROOT", "/host/proc")
    monkeypatch.setenv("PIDFINDER_BACKEND", "PsUtil")
    monkeypatch.setenv("PIDFINDER_LOG_LEVEL", "debug")

    assert get_finder_settings() == FinderSettings(proc_root="/host/proc", backend="psutil", log_level="DEBUG")


def test_falls_back_to_dotenv(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("PIDFINDER_PROC_ROOT=/from/dotenv\n")
    monkeypatch.setattr(runtime, "_DOTENV_CANDIDATES", (env_file,))

    assert get_finder_settings().proc_root == "/from/dotenv"


def test_settings_are_cached(monkeypatch):
    first = get_finder_settings()
    monkeypatch.setenv("PIDFINDER_PROC_ROOT", "/elsewhere")

    assert get_finder_settings() is first


def test_rejects_unknown_backend(monkeypatch):
    monkeypatch.setenv("PIDFINDER_BACKEND", "sysctl")

    with pytest.raises(ConfigurationError, match="Invalid value for PIDFINDER_BACKEND: sysctl"):
        get_finder_settings()


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("PIDFINDER_LOG_LEVEL", "chatty")

    with pytest.raises(ConfigurationError, match="PIDFINDER_LOG_LEVEL"):
        get_finder_settings()


@pytest.mark.parametrize(
    ("factory", "args", "expected"),
    [
        (ConfigurationError.invalid_value, ("backend", "wmi", ""), "Invalid value for backend: wmi"),
        (ConfigurationError.invalid_value, ("backend", "wmi", "Use procfs"), "Invalid value for backend: wmi. Use procfs"),
    ],
)
def test_configuration_error_factories(factory, args, expected):
    exc = factory(*args)
    assert isinstance(exc, ConfigurationError)
    assert str(exc) == expected


def test_field_readers_validate_independently(monkeypatch):
    from pidfinder.config import get_backend, get_log_level, get_proc_root

    monkeypatch.setenv("PIDFINDER_BACKEND", "kvm")
    monkeypatch.setenv("PIDFINDER_PROC_ROOT", "/host/proc")
    monkeypatch.setenv("PIDFINDER_LOG_LEVEL", "error")

    assert get_proc_root() == "/host/proc"
    assert get_log_level() == "ERROR"
    with pytest.raises(ConfigurationError, match="PIDFINDER_BACKEND"):
        get_backend()
