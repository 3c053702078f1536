# carga de percy-agent.js (recurso empaquetado)

from __future__ import annotations
import sys
from pathlib import Path
from typing import Optional

AGENT_JS_FILE = "percy-agent.js"

def bundled_agent_js_path() -> Path:
    return Path(__file__).resolve().parent / "resources" / AGENT_JS_FILE

def load_agent_js(path: Optional[str | Path] = None) -> Optional[str]:
    """
    Lee percy-agent.js una sola vez (al construir el cliente).
    Devuelve el texto completo, o None si no existe o no se puede leer.
    Nunca lanza: sin script, el snapshot queda deshabilitado.
    """
    p = Path(path).expanduser() if path else bundled_agent_js_path()
    try:
        text = p.read_text(encoding="utf-8")
    except Exception as e:
        print(f"[PERCY] No se pudo cargar {p.name} ({e!r}). Snapshotting will not work.",
              file=sys.stderr)
        return None

    if not text.strip():
        print(f"[PERCY] {p.name} está vacío. Snapshotting will not work.", file=sys.stderr)
        return None
    return text
