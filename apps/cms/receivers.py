"""
Cache invalidation on delete.

Cascaded deletes never call Model.delete(), so invalidation hangs off the
delete signals, which Django sends for every collected row.
"""
from django.db.models.signals import post_delete, pre_delete
from django.dispatch import receiver

from .models import CmsPage, Layout, StaticPage, Theme


@receiver(pre_delete, sender=Theme, dispatch_uid='cms.forget_theme_objects')
def forget_theme_objects(sender, instance, **kwargs):
    instance.forget_cached_objects()


def forget_deleted_object(sender, instance, **kwargs):
    instance.forget_cached()


for model in (Layout, CmsPage, StaticPage):
    post_delete.connect(
        forget_deleted_object,
        sender=model,
        dispatch_uid=f'cms.forget_deleted_{model._meta.model_name}',
    )
