import os

from appdirs import user_config_dir

CONFIG_PATH = os.path.join(user_config_dir("fastaval"), "fastaval.yaml")
VERSION = "0.3.0"
CTX_SETTINGS = dict(help_option_names=["-h", "--help"])
