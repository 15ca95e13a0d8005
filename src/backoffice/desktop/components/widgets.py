"""Reusable widget components for console views."""

from __future__ import annotations

from typing import Optional

import flet as ft


def build_card(
    title: str,
    content: ft.Control,
    subtitle: Optional[str] = None,
) -> ft.Card:
    """Build a titled card around ``content``."""

    header_controls: list[ft.Control] = [ft.Text(title, size=16, weight=ft.FontWeight.BOLD)]
    if subtitle:
        header_controls.append(ft.Text(subtitle, size=12, color=ft.Colors.ON_SURFACE_VARIANT))

    return ft.Card(
        content=ft.Column(
            [
                ft.Container(
                    content=ft.Row(header_controls, alignment=ft.MainAxisAlignment.SPACE_BETWEEN),
                    padding=ft.padding.only(left=16, right=16, top=16, bottom=8),
                ),
                ft.Divider(height=1),
                ft.Container(content=content, padding=16),
            ],
            spacing=0,
        ),
        elevation=2,
    )


def empty_state(message: str) -> ft.Container:
    """Simple empty-state placeholder."""

    return ft.Container(
        content=ft.Column(
            [
                ft.Icon(ft.Icons.INBOX, size=40, color=ft.Colors.ON_SURFACE_VARIANT),
                ft.Text(message, color=ft.Colors.ON_SURFACE_VARIANT),
            ],
            alignment=ft.MainAxisAlignment.CENTER,
            horizontal_alignment=ft.CrossAxisAlignment.CENTER,
        ),
        padding=20,
    )

