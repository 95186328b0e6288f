import apps.menus.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('cms', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Menu',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.SlugField(max_length=64)),
                ('name', models.CharField(max_length=100)),
                ('items', models.JSONField(blank=True, default=list, help_text='Nested menu items: [{"title", "type", "url", "reference", "items": [...]}]', validators=[apps.menus.models.validate_menu_items])),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('theme', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='menus', to='cms.theme')),
            ],
            options={
                'ordering': ['name'],
                'unique_together': {('theme', 'code')},
            },
        ),
    ]
