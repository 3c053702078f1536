#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# archivo principal (mínimo)

import sys

from percy_client.config import load_settings
from percy_client.run import run_snapshot

if __name__ == "__main__":
    try:
        settings = load_settings()
        ok = run_snapshot(settings)
        sys.exit(0 if ok else 1)
    except KeyboardInterrupt:
        pass
