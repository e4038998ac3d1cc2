#!/usr/bin/env python3
"""
Utility to choose the Paddle Court keyboard layout
"""

import argparse
import sys

from paddle_court.utils.keyboard_layout import LayoutPreferences
from paddle_court.utils.keyboard_layout import apply_layout
from paddle_court.utils.keyboard_layout import available_layouts
from paddle_court.utils.keyboard_layout import layout_help
from paddle_court.utils.keyboard_layout import save_layout


def main() -> int:
    layouts = available_layouts()

    parser = argparse.ArgumentParser(description="Paddle Court keyboard configuration")
    parser.add_argument("layout", nargs="?", choices=sorted(layouts), help="Layout to save")
    args = parser.parse_args()

    if args.layout:
        if not save_layout(args.layout):
            print(f"Could not save {args.layout} as the preferred layout")
            return 1
        print(f"Layout changed to: {layouts[args.layout]}")
    else:
        apply_layout()

    current_layout = LayoutPreferences.load().resolve()
    print("Available layouts:")
    for key, name in layouts.items():
        marker = " (current)" if key == current_layout else ""
        print(f"  {key}: {name}{marker}")
    print()
    print(layout_help())
    return 0


if __name__ == "__main__":
    sys.exit(main())
