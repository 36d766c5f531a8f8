#!/usr/bin/env python3
"""
Show Controller - gamepad visualizer for streaming overlays.

Usage:
  python show_control.py --config config.yaml
"""

import sys

from show_controller.cli import main

if __name__ == "__main__":
    sys.exit(main())
