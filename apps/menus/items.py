"""
Menu item definitions and the references generated from them.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

URL_TYPE = 'url'


@dataclass
class MenuItem:
    """One entry of a menu definition, as stored in Menu.items."""
    title: str = ""
    type: str = URL_TYPE
    url: str = ""
    reference: Optional[str] = None
    code: str = ""
    css_class: str = ""
    hidden: bool = False
    items: List['MenuItem'] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MenuItem':
        return cls(
            title=data.get('title', ''),
            type=data.get('type') or URL_TYPE,
            url=data.get('url', ''),
            reference=data.get('reference'),
            code=data.get('code', ''),
            css_class=data.get('cssClass', ''),
            hidden=bool(data.get('isHidden', False)),
            items=[cls.from_dict(child) for child in data.get('items') or []],
        )

    @property
    def is_resolvable(self) -> bool:
        return self.type != URL_TYPE


@dataclass
class MenuItemReference:
    """A generated menu entry, ready to render."""
    title: str = ""
    type: str = URL_TYPE
    url: str = ""
    code: str = ""
    css_class: str = ""
    is_active: bool = False
    hidden: bool = False
    items: List['MenuItemReference'] = field(default_factory=list)


def visible_references(references: List[MenuItemReference]) -> List[MenuItemReference]:
    """Copy of the tree without hidden entries. A hidden entry takes its subtree with it."""
    return [
        replace(reference, items=visible_references(reference.items))
        for reference in references
        if not reference.hidden
    ]
