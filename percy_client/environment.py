# info de entorno (clientInfo / environmentInfo)

from __future__ import annotations
import platform
from dataclasses import dataclass

from .version import __version__

CLIENT_NAME = "percy-selenium-python"

def _selenium_version() -> str:
    try:
        import selenium
        return getattr(selenium, "__version__", "unknown")
    except Exception:
        return "unknown"

@dataclass(frozen=True)
class Environment:
    """
    Metadatos de solo lectura, calculados una vez a partir del driver:
    - client_info: versión de esta librería
    - environment_info: selenium, python, plataforma y navegador/versión
    """
    sdk_version: str
    selenium_version: str
    python_version: str
    platform_name: str
    browser_name: str
    browser_version: str

    @classmethod
    def from_driver(cls, driver) -> "Environment":
        try:
            caps = dict(getattr(driver, "capabilities", None) or {})
        except Exception:
            caps = {}

        browser_name = str(caps.get("browserName") or "unknown-browser")
        browser_version = str(caps.get("browserVersion") or caps.get("version") or "unknown")
        platform_name = str(caps.get("platformName") or caps.get("platform") or "unknown-platform").lower()

        return cls(
            sdk_version=__version__,
            selenium_version=_selenium_version(),
            python_version=platform.python_version(),
            platform_name=platform_name,
            browser_name=browser_name,
            browser_version=browser_version,
        )

    @property
    def client_info(self) -> str:
        return f"{CLIENT_NAME}/{self.sdk_version}"

    @property
    def environment_info(self) -> str:
        return (f"selenium/{self.selenium_version}; python/{self.python_version}; "
                f"{self.platform_name}; {self.browser_name}/{self.browser_version}")
