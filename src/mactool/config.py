# config.py

import os

DEFAULT_CONFIG_PATH = os.path.join(os.path.expanduser('~'), '.mactool.conf')

DEFAULT_OUI_URL = 'http://standards-oui.ieee.org/oui/oui.csv'

ENV_PREFIX = 'MACTOOL_'
