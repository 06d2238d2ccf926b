"""Navigation menu sections.

Sections come from ``settings.CONSOLE_MENU_SECTIONS``::

    CONSOLE_MENU_SECTIONS = {
        "compute": {"name": "Compute", "items": ["ems_cloud", "vm_cloud", ...]},
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field

from django.conf import settings


@dataclass(frozen=True)
class MenuItem:
    id: str
    name: str = ""
    href: str = ""


@dataclass(frozen=True)
class MenuSection:
    id: str
    name: str = ""
    items: tuple[MenuItem, ...] = field(default_factory=tuple)


def get_menu_sections() -> dict[str, MenuSection]:
    raw = getattr(settings, "CONSOLE_MENU_SECTIONS", None) or {}
    sections: dict[str, MenuSection] = {}
    for section_id, section in raw.items():
        items = tuple(
            item if isinstance(item, MenuItem) else MenuItem(id=str(item))
            for item in (section.get("items") or ())
        )
        sections[section_id] = MenuSection(id=section_id, name=section.get("name", ""), items=items)
    return sections


def item_in_section(layout: str, section_id: str) -> bool:
    section = get_menu_sections().get(section_id)
    if section is None:
        return False
    return any(item.id == layout for item in section.items)
