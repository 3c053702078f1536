# runner: abre una página en un navegador headless y la envía a percy

from __future__ import annotations
import sys

from .config import Settings
from .percy import Percy

def open_browser(browser: str, headless: bool = True):
    """
    Crea un driver de Chrome o Edge con webdriver-manager.
    Lanza si selenium/webdriver-manager no están instalados o el driver no arranca.
    """
    from selenium import webdriver
    from webdriver_manager.chrome import ChromeDriverManager
    from webdriver_manager.microsoft import EdgeChromiumDriverManager
    from selenium.webdriver.chrome.service import Service as ChromeService
    from selenium.webdriver.edge.service import Service as EdgeService
    from selenium.webdriver.chrome.options import Options as ChromeOptions
    from selenium.webdriver.edge.options import Options as EdgeOptions

    if (browser or "").lower() == "edge":
        opts = EdgeOptions()
        if headless:
            opts.add_argument("--headless=new")
        opts.add_argument("--disable-gpu")
        opts.add_argument("--no-sandbox")
        return webdriver.Edge(service=EdgeService(EdgeChromiumDriverManager().install()), options=opts)

    opts = ChromeOptions()
    if headless:
        opts.add_argument("--headless=new")
    opts.add_argument("--disable-gpu")
    opts.add_argument("--no-sandbox")
    return webdriver.Chrome(service=ChromeService(ChromeDriverManager().install()), options=opts)

def run_snapshot(settings: Settings, driver_factory=open_browser) -> bool:
    """
    Abre PAGE_URL, toma un snapshot y cierra el navegador.
    Devuelve True si el cliente sigue habilitado tras el envío.
    """
    if not settings.PAGE_URL:
        print("[RUN] SNAPSHOT_PAGE_URL vacío", file=sys.stderr)
        return False

    driver = None
    try:
        driver = driver_factory(settings.SELENIUM_BROWSER, settings.HEADLESS)
        driver.set_page_load_timeout(20)
        driver.get(settings.PAGE_URL)

        percy = Percy(driver, settings=settings)
        name = settings.SNAPSHOT_NAME or settings.PAGE_URL
        percy.snapshot(name,
                       widths=list(settings.WIDTHS),
                       min_height=settings.MIN_HEIGHT,
                       enable_javascript=settings.ENABLE_JAVASCRIPT)
        print(f"[RUN] Snapshot '{name}' de {settings.PAGE_URL} (enabled={percy.enabled})")
        return percy.enabled

    except Exception as e:
        print(f"[RUN][ERR] {repr(e)}", file=sys.stderr)
        return False

    finally:
        if driver is not None:
            try:
                driver.quit()
            except Exception as e:
                print(f"[RUN] driver.quit() falló: {e!r}", file=sys.stderr)
