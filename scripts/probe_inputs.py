#!/usr/bin/env python3
"""
Show which inputs the visualizer sees.

Plug in your controller and run this to see held inputs in the same text
form the preferences file uses (b0, a1 max, h0 ^>, ...).
"""

import sys
import time

import pygame

from show_controller.input import Joysticks, format_inputs


def main():
    pygame.init()
    joysticks = Joysticks(pygame)

    print("=" * 70)
    print("INPUT PROBE")
    print("=" * 70)
    print()

    if not joysticks.is_connected():
        print("No joysticks/gamepads found!")
        print("Make sure your controller is plugged in.")
        sys.exit(1)

    for instance_id, name, guid in joysticks.devices():
        print(f"  [{instance_id}] {name}  guid={guid}")
    print()
    print("Leave the sticks centered for a moment, then press things.")
    print("Press Ctrl+C to exit")
    print()

    last = None
    try:
        while True:
            # Process pygame events (required for joystick updates)
            pygame.event.pump()

            state = joysticks.poll()
            label = format_inputs(state.active_inputs())
            if label != last:
                print(f"\r{state.active or '-'}: {label or '(nothing held)'}".ljust(78), end="", flush=True)
                last = label

            time.sleep(0.05)

    except KeyboardInterrupt:
        print("\n\nExiting...")

    joysticks.cleanup()
    pygame.quit()


if __name__ == "__main__":
    main()
