#!/usr/bin/env python3
#
# PROJECT: wireframe-script-renderer
# MODULE: render_script.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import sys

from wireframe_script_renderer.cli import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)
