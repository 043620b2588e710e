# Generated migration for the species catalog

from django.conf import settings
from django.db import migrations, models
import django.core.validators
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Species',
            fields=[
                ('id', models.BigAutoField(primary_key=True, serialize=False)),
                ('scientific_name', models.CharField(
                    help_text='Binomial nomenclature (Genus species)',
                    max_length=200
                )),
                ('common_name', models.CharField(
                    blank=True,
                    help_text='Common name in English',
                    max_length=200,
                    null=True
                )),
                ('kingdom', models.CharField(
                    choices=[
                        ('Animalia', 'Animalia'),
                        ('Plantae', 'Plantae'),
                        ('Fungi', 'Fungi'),
                        ('Protista', 'Protista'),
                        ('Archaea', 'Archaea'),
                        ('Bacteria', 'Bacteria'),
                    ],
                    max_length=20
                )),
                ('total_population', models.PositiveBigIntegerField(
                    blank=True,
                    help_text='Estimated number of living individuals',
                    null=True,
                    validators=[
                        django.core.validators.MinValueValidator(1),
                        django.core.validators.MaxValueValidator(9223372036854775807),
                    ]
                )),
                ('image', models.URLField(
                    blank=True,
                    help_text='Link to a representative image',
                    max_length=500,
                    null=True
                )),
                ('description', models.TextField(
                    blank=True,
                    help_text='Free-form description of the species',
                    null=True
                )),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('author', models.ForeignKey(
                    editable=False,
                    help_text='User who created this entry',
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='species',
                    to=settings.AUTH_USER_MODEL
                )),
            ],
            options={
                'verbose_name': 'Species',
                'verbose_name_plural': 'Species',
                'db_table': 'species',
                'ordering': ['-id'],
                'indexes': [
                    models.Index(fields=['scientific_name'], name='species_sci_name_idx'),
                    models.Index(fields=['kingdom'], name='species_kingdom_idx'),
                    models.Index(fields=['author'], name='species_author_idx'),
                ],
            },
        ),
    ]
