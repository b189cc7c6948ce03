from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ContentItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('content_type', models.CharField(db_index=True, max_length=40)),
                ('slug', models.SlugField(max_length=200)),
                ('title', models.CharField(max_length=200)),
                ('body', models.TextField(blank=True, default='')),
                (
                    'status',
                    models.CharField(
                        choices=[('publish', 'Published'), ('draft', 'Draft'), ('protected', 'Protected')],
                        default='publish',
                        max_length=20,
                    ),
                ),
                ('created', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'ordering': ['-created', '-pk'],
            },
        ),
        migrations.CreateModel(
            name='ItemMeta',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('key', models.CharField(max_length=255)),
                ('value', models.TextField(blank=True, default='')),
                (
                    'item',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name='meta', to='core.contentitem'
                    ),
                ),
            ],
            options={
                'verbose_name': 'item meta',
                'verbose_name_plural': 'item meta',
            },
        ),
        migrations.AddConstraint(
            model_name='contentitem',
            constraint=models.UniqueConstraint(fields=('content_type', 'slug'), name='unique_content_type_slug'),
        ),
        migrations.AddConstraint(
            model_name='itemmeta',
            constraint=models.UniqueConstraint(fields=('item', 'key'), name='unique_item_meta_key'),
        ),
    ]
