#!/usr/bin/env python
"""Desktop app entrypoint for HabitFlow."""

import flet as ft

from habitflow.desktop.app import main

if __name__ == "__main__":
    ft.app(target=main)
