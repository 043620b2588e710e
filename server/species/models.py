"""
Species models for the species catalog.
"""
from django.conf import settings
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.utils.translation import gettext_lazy as _

from .rules import KINGDOMS, MAX_IMAGE_LENGTH, MAX_NAME_LENGTH, MAX_POPULATION


class Species(models.Model):
    """
    A species entry in the shared catalog.
    Any signed-in user can read it; only its author can change or delete it.
    """
    KINGDOM_CHOICES = [(kingdom, kingdom) for kingdom in KINGDOMS]

    # Auto-increment id doubles as insertion order for the "newest first" listing
    id = models.BigAutoField(primary_key=True)

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='species',
        editable=False,
        help_text=_('User who created this entry')
    )

    scientific_name = models.CharField(
        max_length=MAX_NAME_LENGTH,
        help_text=_('Binomial nomenclature (Genus species)')
    )
    common_name = models.CharField(
        max_length=MAX_NAME_LENGTH,
        null=True,
        blank=True,
        help_text=_('Common name in English')
    )
    kingdom = models.CharField(max_length=20, choices=KINGDOM_CHOICES)
    total_population = models.PositiveBigIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(1), MaxValueValidator(MAX_POPULATION)],
        help_text=_('Estimated number of living individuals')
    )
    image = models.URLField(
        max_length=MAX_IMAGE_LENGTH,
        null=True,
        blank=True,
        help_text=_('Link to a representative image')
    )
    description = models.TextField(
        null=True,
        blank=True,
        help_text=_('Free-form description of the species')
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'species'
        verbose_name = _('Species')
        verbose_name_plural = _('Species')
        ordering = ['-id']
        indexes = [
            models.Index(fields=['scientific_name'], name='species_sci_name_idx'),
            models.Index(fields=['kingdom'], name='species_kingdom_idx'),
            models.Index(fields=['author'], name='species_author_idx'),
        ]

    def __str__(self):
        if self.common_name:
            return f"{self.scientific_name} ({self.common_name})"
        return self.scientific_name
