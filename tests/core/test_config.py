import json
import os
import subprocess
import sys
from pathlib import Path

import primkit
import pytest
from primkit.core.config import Settings


@pytest.fixture
def missing_config(tmp_path):
    return {"PRIMKIT_CONFIG": str(tmp_path / "absent.json")}


def test_defaults(missing_config):
    settings = Settings.load(environ=missing_config)

    assert settings.LOG_LEVEL == "INFO"
    assert settings.TRUNCATE_SUFFIX == "..."
    assert settings.YES_LABEL == "yes"
    assert settings.TIMEZONE is None
    assert settings.CONFIG_PATH == Path(missing_config["PRIMKIT_CONFIG"])


def test_environment_overrides(missing_config):
    environ = {
        **missing_config,
        "PRIMKIT_YES_LABEL": "ja",
        "PRIMKIT_LOG_LEVEL": "debug",
        "PRIMKIT_TIMEZONE": "Europe/Berlin",
    }
    settings = Settings.load(environ=environ)

    assert settings.YES_LABEL == "ja"
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.TIMEZONE == "Europe/Berlin"


def test_plain_log_level_variable(missing_config):
    settings = Settings.load(environ={**missing_config, "LOG_LEVEL": "warning"})
    assert settings.LOG_LEVEL == "WARNING"


def test_json_file_then_environment(tmp_path):
    config_path = tmp_path / "primkit.json"
    config_path.write_text(json.dumps({"no_label": "nein", "YES_LABEL": "ja"}))

    settings = Settings.load(
        environ={"PRIMKIT_CONFIG": str(config_path), "PRIMKIT_YES_LABEL": "jawohl"}
    )

    assert settings.NO_LABEL == "nein"
    assert settings.YES_LABEL == "jawohl"
    assert settings.CONFIG_PATH == config_path


def test_json_file_must_hold_object(tmp_path):
    config_path = tmp_path / "primkit.json"
    config_path.write_text("[1, 2]")

    with pytest.raises(ValueError):
        Settings.load(environ={"PRIMKIT_CONFIG": str(config_path)})


@pytest.mark.parametrize(
    "field, value",
    [("LOG_LEVEL", "LOUD"), ("TIMEZONE", "Mars/Olympus_Mons")],
)
def test_invalid_values(missing_config, field, value):
    with pytest.raises(ValueError):
        Settings.load(environ={**missing_config, f"PRIMKIT_{field}": value})


@pytest.mark.parametrize("value", ["warn", "WARN", " Warning "])
def test_warn_is_an_alias_for_warning(missing_config, value):
    plain = Settings.load(environ={**missing_config, "LOG_LEVEL": value})
    assert plain.LOG_LEVEL == "WARNING"
    prefixed = Settings.load(environ={**missing_config, "PRIMKIT_LOG_LEVEL": value})
    assert prefixed.LOG_LEVEL == "WARNING"


@pytest.mark.parametrize("value", ["trace", "verbose", ""])
def test_unknown_plain_log_level_is_ignored(missing_config, value):
    settings = Settings.load(environ={**missing_config, "LOG_LEVEL": value})
    assert settings.LOG_LEVEL == "INFO"


def test_prefixed_log_level_wins_over_plain(missing_config):
    environ = {**missing_config, "LOG_LEVEL": "trace", "PRIMKIT_LOG_LEVEL": "error"}
    assert Settings.load(environ=environ).LOG_LEVEL == "ERROR"


def test_import_survives_foreign_log_level(tmp_path):
    src_dir = Path(primkit.__file__).resolve().parents[1]
    env = {
        **os.environ,
        "LOG_LEVEL": "trace",
        "PRIMKIT_CONFIG": str(tmp_path / "absent.json"),
        "PYTHONPATH": os.pathsep.join(
            filter(None, [str(src_dir), os.environ.get("PYTHONPATH")])
        ),
    }
    env.pop("PRIMKIT_LOG_LEVEL", None)

    result = subprocess.run(
        [sys.executable, "-c", "import primkit; print(primkit.settings.LOG_LEVEL)"],
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip().splitlines()[-1] == "INFO"
    assert "Ignoring unknown LOG_LEVEL='trace'" in result.stdout
