#!/usr/bin/env python3
"""Mahjong table demo - Terminal CLI"""

from mahjong_rules.cli import main

if __name__ == "__main__":
    main()
