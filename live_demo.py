#!/usr/bin/env python3
"""
Live Meme Grid Demo
===================

Mounts the meme grid screen against the real endpoint and prints what the
screen would show: the grid, then the detail view for the first meme.

RUN:
    python live_demo.py
"""

from __future__ import annotations
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from backend.observability import configure_logging
from frontend.presentation import create_screen, ScreenViewModel


def print_screen(view: ScreenViewModel) -> None:
    print("=" * 70)
    print(f"  {view.title}  [{view.phase.value}]")
    print("=" * 70)

    if view.loading:
        print(f"  {view.loading.message}...")

    if view.alert:
        print(f"  [!] {view.alert.title}: {view.alert.message}")

    for card in view.cards[:20]:
        marker = "*" if card.is_selected else " "
        print(f" {marker} {card.position:3d}  {card.caption[:40]:40s}  {card.image_url}")
    if len(view.cards) > 20:
        print(f"       ... {len(view.cards) - 20} more")

    if view.detail:
        d = view.detail
        print("-" * 70)
        print(f"  DETAIL: {d.title}")
        print(f"  {d.image_url}")
        print(f"  {d.width}x{d.height}, {d.box_count} text boxes")
    print()


async def run() -> None:
    screen = create_screen()
    print_screen(screen.render())

    await screen.mount()
    print_screen(screen.render())

    if screen.state.memes:
        screen.select(screen.state.memes[0])
        print_screen(screen.render())
        screen.dismiss_detail()
    elif screen.state.error_flag:
        screen.acknowledge_error()

    print(f"Audit entries (presentation): {screen.collector.entry_count}")


if __name__ == "__main__":
    configure_logging("INFO")
    asyncio.run(run())
