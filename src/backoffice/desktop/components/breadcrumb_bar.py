"""Breadcrumb bar rendered above console pages."""

from __future__ import annotations

from typing import Callable, Sequence

import flet as ft

from ...navigation.breadcrumbs import BreadcrumbItem, with_home_default


def build_breadcrumb_bar(
    items: Sequence[BreadcrumbItem],
    on_navigate: Callable[[str], None],
) -> ft.Row:
    """Render crumbs left to right; navigable crumbs call ``on_navigate(path)``.

    An empty trail renders the single Home crumb. The last crumb is always
    plain text, even when a caller-supplied trail gives it a path.
    """

    crumbs = with_home_default(items)
    controls: list[ft.Control] = []
    for index, item in enumerate(crumbs):
        is_last = index == len(crumbs) - 1
        if index:
            controls.append(
                ft.Icon(ft.Icons.CHEVRON_RIGHT, size=16, color=ft.Colors.ON_SURFACE_VARIANT)
            )
        if item.navigable and not is_last:
            controls.append(
                ft.TextButton(
                    text=item.label,
                    on_click=lambda _e, path=item.path: on_navigate(path),
                )
            )
        else:
            controls.append(
                ft.Text(
                    item.label,
                    size=14,
                    color=ft.Colors.ON_SURFACE_VARIANT if is_last else None,
                )
            )

    return ft.Row(controls, spacing=4, wrap=True)
