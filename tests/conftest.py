import io

import pytest

from mactool.config_reader import Config
from mactool.mactool_logger import MactoolLogger
from mactool.oui_database import OuiDatabase
from mactool.processor import MacProcessor

LOOKUP_CSV = """\
Registry,Assignment,Organization Name,Organization Address
MA-L,00005E,"Banana, Inc.",1 Infinite Loop Cupocoffee CA US 12345
MA-L,123ABC,Swede Instruments,Storgatan 1 Stockholm SE 12345
"""

VENDOR_CSV = """\
MA-L,111111,"Banana, Inc.",1 Infinite Loop Cupertino CA US 12514
MA-L,222222,"Banana, Inc.",1 Infinite Loop Cupertino CA US 95014
MA-L,ABCDEF,Swede Instruments CA,12300 TI Blvd Dallas TX US 75243
MA-L,ABCABC,Sweet Instruments,12500 TI Blvd Dallas TX US 75243
"""


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def lookup_db():
    return OuiDatabase.load(io.StringIO(LOOKUP_CSV))


@pytest.fixture
def vendor_db():
    return OuiDatabase.load(io.StringIO(VENDOR_CSV))


@pytest.fixture
def config(tmp_path):
    return Config(config_path=str(tmp_path / "mactool.conf"), csv_file=str(tmp_path / "oui.csv"))


@pytest.fixture
def logger():
    return MactoolLogger(log_level="quiet")


@pytest.fixture
def processor(config, logger):
    return MacProcessor(config, logger)


@pytest.fixture
def tty_stdin(monkeypatch):
    """Pretend stdin is an interactive terminal with nothing typed."""
    stream = FakeTTY("")
    monkeypatch.setattr("sys.stdin", stream)
    return stream
