"""
Core models: UserGroup.
"""
import re

from django.conf import settings
from django.db import models


class UserGroup(models.Model):
    """
    Front-end visitor group, e.g. "registered", "editors", "admin".

    Pages and layouts restrict visibility by listing group codes in their
    session settings, so the code is the stable identifier and the name is
    for display only.
    """
    name = models.CharField(max_length=100)
    code = models.SlugField(max_length=100, unique=True)
    description = models.TextField(blank=True)
    users = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        related_name='user_groups',
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']
        verbose_name = 'user group'
        verbose_name_plural = 'user groups'

    def __str__(self):
        return self.name

    @classmethod
    def generate_code(cls, name):
        """
        Generate a group code from a display name.
        "Site Editors" -> "site-editors"
        """
        return re.sub(r'[^a-z0-9]+', '-', name.lower()).strip('-')

    def save(self, *args, **kwargs):
        if not self.code:
            self.code = self.generate_code(self.name)
        super().save(*args, **kwargs)
