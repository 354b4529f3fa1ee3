import webbrowser
from ..core.console import Console
from ..core.spinner import Spinner
from ..data.paths import WINGET_INSTALL_URL
from .winget import WingetClient

class WingetNotFoundError(RuntimeError):
    pass

class DependencyService:
    def __init__(self, console: Console, winget: WingetClient, confirmer,
                 opener=webbrowser.open, install_url: str = WINGET_INSTALL_URL, spinner: bool = True):
        self.console = console
        self.winget = winget
        self.confirmer = confirmer
        self.opener = opener
        self.install_url = install_url
        self.spinner = spinner

    def install_winget(self) -> bool:
        """
        Send the user to the App Installer page, wait until they say it is
        installed, then look for winget again.
        """
        self.console.warn("winget was not found.")
        self.console.info(f"Opening {self.install_url}; install 'App Installer', then come back here.")
        try:
            self.opener(self.install_url)
        except Exception as e:
            self.console.warn(f"Could not open a browser ({e}). Open the link above manually.")
        self.confirmer.wait("Press Enter once App Installer is installed…")
        return self.winget.is_available()

    def refresh_sources(self):
        try:
            if self.spinner:
                with Spinner("Refreshing winget sources"):
                    ok = self.winget.update_sources()
            else:
                ok = self.winget.update_sources()
        except Exception as e:
            self.console.warn(f"Source refresh failed: {e}")
            return
        if ok:
            self.console.ok("winget sources refreshed.")
        else:
            self.console.warn("Source refresh failed; continuing with cached sources.")

    def ensure(self):
        self.console.info("Checking for winget…")
        if self.winget.is_available():
            self.console.ok("winget is available.")
        elif self.install_winget():
            self.console.ok("winget is now available.")
        else:
            raise WingetNotFoundError("winget is still not available after the manual install step")
        self.refresh_sources()
