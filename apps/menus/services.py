"""
Menu services.
"""
import logging
from typing import List, Optional

from .items import MenuItem, MenuItemReference, visible_references
from .models import Menu
from .signals import (
    references_aborted, references_generated, references_generating, resolve_item
)

logger = logging.getLogger(__name__)


class MenuService:
    """Service class for turning menu definitions into rendered references."""

    def __init__(self, theme):
        self.theme = theme

    def get_menu(self, code: str) -> Optional[Menu]:
        return Menu.objects.filter(theme=self.theme, code=code).first()

    def generate_references(self, menu: Menu, current_url: Optional[str] = None) -> List[MenuItemReference]:
        """
        Build the reference tree for a menu.

        Fires references_generating, then resolve_item for every non-url
        item in depth-first pre-order, then references_generated with the
        finished tree. If building fails, references_aborted is sent before
        the error propagates.
        """
        references_generating.send(sender=self.__class__, menu=menu, theme=self.theme)

        try:
            references = self._build(menu.get_items(), current_url)
        except Exception:
            references_aborted.send(sender=self.__class__, menu=menu, theme=self.theme)
            raise

        references_generated.send(sender=self.__class__, items=references)
        return references

    def get_visible_references(self, code: str, current_url: Optional[str] = None) -> List[MenuItemReference]:
        """Generated references of the named menu, hidden entries removed."""
        menu = self.get_menu(code)
        if menu is None:
            logger.debug(f"Menu '{code}' not found in theme '{self.theme}'")
            return []
        return visible_references(self.generate_references(menu, current_url))

    def _build(self, items: List[MenuItem], current_url: Optional[str]) -> List[MenuItemReference]:
        result = []
        for item in items:
            # Authored visibility is read before receivers see the item
            reference = MenuItemReference(
                title=item.title,
                type=item.type,
                code=item.code,
                css_class=item.css_class,
                hidden=item.hidden,
            )

            if item.is_resolvable:
                resolved = self._resolve(item, current_url)
                if resolved:
                    reference.url = resolved.get('url', '')
                    reference.is_active = bool(resolved.get('is_active'))
            else:
                reference.url = item.url
                reference.is_active = bool(item.url) and item.url == current_url

            reference.items = self._build(item.items, current_url)
            result.append(reference)
        return result

    def _resolve(self, item: MenuItem, current_url: Optional[str]):
        responses = resolve_item.send(
            sender=self.__class__,
            type=item.type,
            item=item,
            current_url=current_url,
            theme=self.theme,
        )
        for _receiver, response in responses:
            if isinstance(response, dict):
                return response
        return None
