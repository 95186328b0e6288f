"""
CMS models: themes and the layouts, CMS pages and static pages they hold.

Page and layout configuration lives in a nested ``settings`` JSON document,
the same shape the template front matter is parsed into, e.g.::

    {
        "layout": "default",
        "components": {
            "session": {"security": "user", "allowedUserGroups": ["admin"]}
        }
    }
"""
from django.conf import settings
from django.core.cache import cache
from django.db import models

DEFAULT_CACHE_TIMEOUT = 300


def get_path(data, path, default=None):
    """
    Read a dotted path out of nested mappings.
    get_path({'a': {'b': 1}}, 'a.b') -> 1
    """
    if not path:
        return default
    value = data
    for key in path.split('.'):
        if not isinstance(value, dict) or key not in value:
            return default
        value = value[key]
    return value


class Theme(models.Model):
    """A site theme. Every template object belongs to exactly one theme."""
    code = models.SlugField(max_length=64, unique=True)
    name = models.CharField(max_length=100)
    description = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['name']

    def __str__(self):
        return self.name

    @classmethod
    def get_active(cls):
        """Theme named by settings.CMS_ACTIVE_THEME, or None."""
        code = getattr(settings, 'CMS_ACTIVE_THEME', None)
        if not code:
            return None
        return cls.objects.filter(code=code).first()

    def forget_cached_objects(self, code=None):
        """Drop the cached layouts and pages of this theme, keyed under code."""
        code = code or self.code
        for model in (Layout, CmsPage, StaticPage):
            for file_name in model.objects.filter(theme=self).values_list('file_name', flat=True):
                cache.delete(model.cache_key(code, file_name))

    def save(self, *args, **kwargs):
        previous_code = None
        if self.pk:
            previous_code = Theme.objects.filter(pk=self.pk).values_list('code', flat=True).first()
        super().save(*args, **kwargs)
        if previous_code and previous_code != self.code:
            self.forget_cached_objects(previous_code)


class CmsObject(models.Model):
    """
    Abstract base for theme template objects addressed by file name.

    Lookups through load_cached() go through the Django cache. Saving drops
    the entry under both the current and the previously saved key; deletes,
    cascaded ones included, are handled in apps.cms.receivers.
    """
    theme = models.ForeignKey(Theme, on_delete=models.CASCADE, related_name='+')
    file_name = models.CharField(
        max_length=255,
        help_text='Reference used by menus and pages, e.g. "about" or "blog/post"'
    )
    settings = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True
        ordering = ['file_name']

    def __str__(self):
        return self.file_name

    @classmethod
    def cache_key(cls, theme_code, file_name):
        return f"cms:{cls._meta.model_name}:{theme_code}:{file_name}"

    @classmethod
    def load_cached(cls, theme, file_name):
        """
        Return the object with this file name in the theme, or None.
        Misses are not cached.
        """
        if theme is None or not file_name:
            return None

        key = cls.cache_key(theme.code, file_name)
        obj = cache.get(key)
        if obj is not None:
            return obj

        obj = cls.objects.filter(theme=theme, file_name=file_name).first()
        if obj is not None:
            timeout = getattr(settings, 'CMS_CACHE_TIMEOUT', DEFAULT_CACHE_TIMEOUT)
            cache.set(key, obj, timeout)
        return obj

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._loaded_key = (instance.__dict__.get('theme_id'), instance.__dict__.get('file_name'))
        return instance

    def get_setting(self, path, default=None):
        return get_path(self.settings, path, default)

    def forget_cached(self):
        """Drop the cache entry under the current and the last saved (theme, file name)."""
        theme_code = Theme.objects.filter(pk=self.theme_id).values_list('code', flat=True).first()
        if theme_code:
            cache.delete(self.cache_key(theme_code, self.file_name))

        previous = getattr(self, '_loaded_key', None)
        if previous and previous != (self.theme_id, self.file_name):
            previous_theme_id, previous_file_name = previous
            previous_code = Theme.objects.filter(pk=previous_theme_id).values_list('code', flat=True).first()
            if previous_code and previous_file_name:
                cache.delete(self.cache_key(previous_code, previous_file_name))

    def save(self, *args, **kwargs):
        super().save(*args, **kwargs)
        self.forget_cached()
        self._loaded_key = (self.theme_id, self.file_name)


class Layout(CmsObject):
    """Page layout. Its settings apply to every page that uses it."""
    description = models.CharField(max_length=255, blank=True)

    class Meta(CmsObject.Meta):
        unique_together = ['theme', 'file_name']


class CmsPage(CmsObject):
    """
    Theme page. The layout file name is stored under settings["layout"].
    """
    title = models.CharField(max_length=100)
    url = models.CharField(max_length=255, help_text='URL pattern, e.g. /about')

    class Meta(CmsObject.Meta):
        unique_together = ['theme', 'file_name']
        verbose_name = 'CMS page'
        verbose_name_plural = 'CMS pages'

    @property
    def layout_name(self):
        return self.get_setting('layout')


class StaticPage(CmsObject):
    """
    Content page managed from the backend.
    The layout file name is stored under settings["components"]["viewBag"]["layout"].
    """
    title = models.CharField(max_length=100)
    url = models.CharField(max_length=255)
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='subpages'
    )

    class Meta(CmsObject.Meta):
        unique_together = ['theme', 'file_name']
        verbose_name = 'static page'
        verbose_name_plural = 'static pages'

    @property
    def layout_name(self):
        return self.get_setting('components.viewBag.layout')
