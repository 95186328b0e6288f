"""
Menu models.
"""
from typing import List

from django.core.exceptions import ValidationError
from django.db import models

from .items import MenuItem


def validate_menu_items(value):
    """Menu items must be a list of objects, nested lists included."""
    if not isinstance(value, list):
        raise ValidationError('Menu items must be a list.')
    for entry in value:
        if not isinstance(entry, dict):
            raise ValidationError('Each menu item must be an object.')
        validate_menu_items(entry.get('items') or [])


class Menu(models.Model):
    """
    Named navigation menu of a theme.
    Items are stored as nested JSON, see MenuItem.from_dict for the keys.
    """
    theme = models.ForeignKey('cms.Theme', on_delete=models.CASCADE, related_name='menus')
    code = models.SlugField(max_length=64)
    name = models.CharField(max_length=100)
    items = models.JSONField(
        default=list,
        blank=True,
        validators=[validate_menu_items],
        help_text='Nested menu items: [{"title", "type", "url", "reference", "items": [...]}]'
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        unique_together = ['theme', 'code']

    def __str__(self):
        return self.name

    def get_items(self) -> List[MenuItem]:
        """Parse the stored JSON into fresh MenuItem objects."""
        return [MenuItem.from_dict(entry) for entry in self.items or []]
