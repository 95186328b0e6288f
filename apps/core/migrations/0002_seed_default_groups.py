"""
Create the default "Registered" group.
"""
from django.db import migrations


def create_registered_group(apps, schema_editor):
    UserGroup = apps.get_model('core', 'UserGroup')
    UserGroup.objects.get_or_create(
        code='registered',
        defaults={
            'name': 'Registered',
            'description': 'Default group for signed-up visitors',
        }
    )


def remove_registered_group(apps, schema_editor):
    UserGroup = apps.get_model('core', 'UserGroup')
    UserGroup.objects.filter(code='registered').delete()


class Migration(migrations.Migration):

    dependencies = [
        ('core', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_registered_group, remove_registered_group),
    ]
