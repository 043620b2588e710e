"""
Serializers for species app.
"""
from collections.abc import Mapping

from rest_framework import serializers

from .models import Species
from .rules import FIELD_NAMES, SpeciesValidationError, validate_species
from .store import SpeciesRecord


class SpeciesSerializer(serializers.ModelSerializer):
    """
    Full serializer for Species model.

    Incoming data is checked by the same field rules the dialogs use, so the
    API and the browser pages normalize values identically.
    """
    author_username = serializers.CharField(source='author.username', read_only=True)

    class Meta:
        model = Species
        fields = [
            'id',
            'author',
            'author_username',
            'scientific_name',
            'common_name',
            'kingdom',
            'total_population',
            'image',
            'description',
            'created_at',
            'updated_at',
        ]
        read_only_fields = ['id', 'author', 'created_at', 'updated_at']

    def to_internal_value(self, data):
        """Validate writable fields with the species rules."""
        if not isinstance(data, Mapping):
            raise serializers.ValidationError({
                'non_field_errors': ['Expected an object of species fields.']
            })

        raw = {}
        # PATCH only sends changed fields; fill the rest from the stored row
        if self.instance is not None and self.partial:
            raw.update(SpeciesRecord.from_model(self.instance).field_values())
        raw.update({name: data.get(name) for name in FIELD_NAMES if name in data})

        try:
            payload = validate_species(raw)
        except SpeciesValidationError as e:
            raise serializers.ValidationError(
                {name: [message] for name, message in e.messages().items()}
            )
        return payload.as_dict()


class SpeciesListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for species lists."""
    author_username = serializers.CharField(source='author.username', read_only=True)

    class Meta:
        model = Species
        fields = [
            'id',
            'author',
            'author_username',
            'scientific_name',
            'common_name',
            'kingdom',
            'image',
        ]
