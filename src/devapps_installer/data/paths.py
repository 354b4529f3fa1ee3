from pathlib import Path
import os

APP_NAME = "DevAppsInstaller"

# App Installer (ships winget) on the Microsoft Store
WINGET_INSTALL_URL = "https://apps.microsoft.com/detail/9NBLGGH4NNS1"

BASE_DIR = Path(os.getenv("LOCALAPPDATA", Path.home())) / APP_NAME
CONFIG_DIR = BASE_DIR
CONFIG_PATH = CONFIG_DIR / "config.json"
SETTINGS_PATH = CONFIG_DIR / "settings.json"
LOG_DIR = CONFIG_DIR / "logs"
