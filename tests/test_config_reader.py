from mactool.config import DEFAULT_OUI_URL
from mactool.config_reader import ConfigReader


def write_config(tmp_path, text):
    path = tmp_path / "mactool.conf"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_defaults_when_file_missing(tmp_path):
    config = ConfigReader(str(tmp_path / "missing.conf")).read_config(environ={})
    assert not config.config_found
    assert config.oui_url == DEFAULT_OUI_URL
    assert config.csv_file.endswith("oui.csv")
    assert config.suppress_unmatched is False
    assert config.debug is False
    assert config.log_level == "normal"


def test_file_values(tmp_path):
    path = write_config(tmp_path, """
# OUI database
csv_file = /data/oui.csv
suppress-unmatched = yes
not a setting
log_level = verbose
""")
    config = ConfigReader(path).read_config(environ={})
    assert config.config_found
    assert config.csv_file == "/data/oui.csv"
    assert config.suppress_unmatched is True
    assert config.log_level == "verbose"
    assert config.file_values["suppress_unmatched"] == "yes"


def test_environment_overrides_file(tmp_path):
    path = write_config(tmp_path, "csv_file = /data/oui.csv\ndebug = no\n")
    environ = {"MACTOOL_CSV_FILE": "/env/oui.csv", "MACTOOL_DEBUG": "true", "HOME": "/root"}
    config = ConfigReader(path).read_config(environ=environ)
    assert config.csv_file == "/env/oui.csv"
    assert config.debug is True
    assert config.env_values == {"MACTOOL_CSV_FILE": "/env/oui.csv", "MACTOOL_DEBUG": "true"}


def test_overrides_win(tmp_path):
    path = write_config(tmp_path, "csv_file = /data/oui.csv\n")
    environ = {"MACTOOL_CSV_FILE": "/env/oui.csv"}
    overrides = {"csv_file": "/flag/oui.csv", "suppress_unmatched": None, "debug": True}
    config = ConfigReader(path).read_config(environ=environ, overrides=overrides)
    assert config.csv_file == "/flag/oui.csv"
    assert config.suppress_unmatched is False
    assert config.debug is True


def test_config_path_from_environment(tmp_path):
    path = write_config(tmp_path, "oui_url = http://mirror.example/oui.csv\n")
    config = ConfigReader(str(tmp_path / "missing.conf")).read_config(environ={"MACTOOL_CONFIG": path})
    assert config.config_path == path
    assert config.oui_url == "http://mirror.example/oui.csv"
