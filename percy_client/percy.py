# cliente percy: captura del DOM + envío al agente

from __future__ import annotations
import sys
from typing import Any, Optional, Protocol, Sequence

import requests

from .agent_js import load_agent_js
from .config import Settings, load_settings
from .environment import Environment

class BrowserDriver(Protocol):
    """Lo único que se necesita del driver (selenium WebDriver lo cumple)."""

    def execute_script(self, script: str, *args: Any) -> Any: ...

    @property
    def current_url(self) -> str: ...

def _agent_options() -> str:
    return "{ handleAgentCommunication: false }"

def build_snapshot_js() -> str:
    """JS que instancia PercyAgent y devuelve el DOM serializado."""
    return (f"var percyAgentClient = new PercyAgent({_agent_options()})\n"
            "return percyAgentClient.snapshot('not used')")

def build_snapshot_payload(env: Environment, name: str, url: str, dom_snapshot: str,
                           widths: Optional[Sequence[int]] = None,
                           min_height: Optional[int] = None,
                           enable_javascript: bool = False) -> dict:
    payload = {
        "url": url,
        "name": name,
        "minHeight": min_height,
        "domSnapshot": dom_snapshot,
        "clientInfo": env.client_info,
        "enableJavaScript": bool(enable_javascript),
        "environmentInfo": env.environment_info,
    }
    # Un array vacío de widths rompe el asset discovery del agente
    if widths:
        payload["widths"] = [int(w) for w in widths]
    return payload

class Percy:
    """
    Cliente de Percy para una sesión de navegador.

    Carga percy-agent.js al construirse. Si no se pudo cargar, snapshot() no
    hace nada. Si el POST al agente falla a nivel de transporte, el cliente
    queda deshabilitado para siempre (sin reintentos).
    """

    def __init__(self, driver: BrowserDriver, settings: Optional[Settings] = None):
        self.driver = driver
        self.settings = settings or load_settings()
        self.env = Environment.from_driver(driver)
        self._agent_js = load_agent_js(self.settings.AGENT_JS_PATH or None)
        self._running = True

    @property
    def agent_js(self) -> Optional[str]:
        return self._agent_js

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def enabled(self) -> bool:
        return self._agent_js is not None and self._running

    def _debug(self, msg: str) -> None:
        if self.settings.DEBUG:
            print(f"[PERCY][DEBUG] {msg}", file=sys.stderr)

    def snapshot(self, name: str, widths: Optional[Sequence[int]] = None,
                 min_height: Optional[int] = None,
                 enable_javascript: bool = False) -> None:
        """
        Toma un snapshot del DOM y lo sube al agente.
        - name: nombre legible del snapshot (debería ser único)
        - widths: anchos en píxeles; vacío equivale a no indicarlos
        - min_height: alto mínimo en píxeles
        - enable_javascript: habilita JS en el entorno de render de Percy
        Nunca lanza excepciones al llamador.
        """
        if self._agent_js is None:
            # pasa si no se pudo cargar percy-agent.js en el constructor
            print("[PERCY] percy-agent.js is not available. Snapshotting is disabled.",
                  file=sys.stderr)
            return

        _, dom_snapshot = self._capture_dom()
        url = self._current_url()
        self._post_snapshot(dom_snapshot, name, widths, min_height, url, enable_javascript)

    def _capture_dom(self) -> tuple[bool, str]:
        """
        Inyecta percy-agent.js y pide el snapshot.
        Retorna (ok, dom); si falla la ejecución en el navegador, (False, "").
        """
        try:
            self.driver.execute_script(self._agent_js)
            dom = self.driver.execute_script(build_snapshot_js())
        except Exception as e:
            print(f"[PERCY] Something went wrong attempting to take a snapshot: {e}",
                  file=sys.stderr)
            return False, ""

        if dom is None:
            return True, ""
        return True, dom if isinstance(dom, str) else str(dom)

    def _current_url(self) -> str:
        try:
            return self.driver.current_url or ""
        except Exception as e:
            print(f"[PERCY][ERR] No se pudo leer current_url: {e!r}", file=sys.stderr)
            return ""

    def _post_snapshot(self, dom_snapshot: str, name: str,
                       widths: Optional[Sequence[int]], min_height: Optional[int],
                       url: str, enable_javascript: bool) -> bool:
        """
        POST del DOM al proceso del agente.
        Devuelve True si hubo conexión (el status/cuerpo de la respuesta se ignora).
        """
        if not self._running:
            return False

        payload = build_snapshot_payload(self.env, name, url, dom_snapshot,
                                         widths, min_height, enable_javascript)
        endpoint = self.settings.snapshot_endpoint
        self._debug(f"POST {endpoint} name={name!r} dom={len(dom_snapshot)} chars")

        try:
            # la respuesta da igual, mientras la suite de tests no falle
            requests.post(endpoint, json=payload, timeout=self.settings.REQUEST_TIMEOUT_SEC)
        except requests.RequestException as e:
            print(f"[PERCY][ERR] An error occured when sending the DOM to agent: {e!r}",
                  file=sys.stderr)
            self._running = False
            print("[PERCY] Percy has been disabled", file=sys.stderr)
            return False
        return True

def percy_snapshot(driver: BrowserDriver, name: str, widths: Optional[Sequence[int]] = None,
                   min_height: Optional[int] = None, enable_javascript: bool = False,
                   settings: Optional[Settings] = None) -> Percy:
    """Atajo: crea un cliente, toma un snapshot y devuelve el cliente."""
    client = Percy(driver, settings=settings)
    client.snapshot(name, widths=widths, min_height=min_height,
                    enable_javascript=enable_javascript)
    return client
