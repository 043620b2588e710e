"""
Field validation rules for species records.

Pure functions only: raw form input goes in, a normalized payload or a
collection of field errors comes out. Nothing here touches the database.
"""
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping, Optional

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator

KINGDOMS = ('Animalia', 'Plantae', 'Fungi', 'Protista', 'Archaea', 'Bacteria')

FIELD_NAMES = (
    'scientific_name',
    'common_name',
    'kingdom',
    'total_population',
    'image',
    'description',
)

# Column limits of the species table
MAX_NAME_LENGTH = 200
MAX_IMAGE_LENGTH = 500
MAX_POPULATION = 2 ** 63 - 1

_url_validator = URLValidator(schemes=['http', 'https'])


class FieldValidationError(Exception):
    """Base class for a single field failing its rule."""
    code = 'invalid'

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message


class RequiredFieldError(FieldValidationError):
    code = 'required'


class InvalidEnumError(FieldValidationError):
    code = 'invalid_choice'


class RangeError(FieldValidationError):
    code = 'out_of_range'


class FormatError(FieldValidationError):
    code = 'invalid_format'


class SpeciesValidationError(Exception):
    """Raised when one or more fields fail validation."""

    def __init__(self, errors: Dict[str, FieldValidationError]):
        super().__init__(', '.join(f"{name}: {err.message}" for name, err in errors.items()))
        self.errors = errors

    def messages(self) -> Dict[str, str]:
        return {name: err.message for name, err in self.errors.items()}


@dataclass(frozen=True)
class SpeciesPayload:
    """Normalized, validated field values ready for the store."""
    scientific_name: str
    kingdom: str
    common_name: Optional[str] = None
    total_population: Optional[int] = None
    image: Optional[str] = None
    description: Optional[str] = None

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def normalize_optional_text(value) -> Optional[str]:
    """Trim a nullable text value; blank becomes None."""
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def clean_scientific_name(value) -> str:
    name = '' if value is None else str(value).strip()
    if not name:
        raise RequiredFieldError('scientific_name', 'Scientific name is required.')
    if len(name) > MAX_NAME_LENGTH:
        raise FormatError(
            'scientific_name',
            f"Scientific name must be at most {MAX_NAME_LENGTH} characters."
        )
    return name


def clean_common_name(value) -> Optional[str]:
    name = normalize_optional_text(value)
    if name is not None and len(name) > MAX_NAME_LENGTH:
        raise FormatError('common_name', f"Common name must be at most {MAX_NAME_LENGTH} characters.")
    return name


def clean_kingdom(value) -> str:
    if value not in KINGDOMS:
        raise InvalidEnumError(
            'kingdom',
            f"Kingdom must be one of: {', '.join(KINGDOMS)}."
        )
    return value


def clean_total_population(value) -> Optional[int]:
    """
    Accept an integer from 1 up to the largest 64-bit value, or None.

    Browser forms send strings, so a string of digits is parsed and a blank
    string means "no value". Booleans are rejected even though they are ints.
    """
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = int(text)
        except ValueError:
            raise RangeError('total_population', 'Total population must be a whole number.')
    elif isinstance(value, float) and value.is_integer():
        value = int(value)

    if isinstance(value, bool) or not isinstance(value, int):
        raise RangeError('total_population', 'Total population must be a whole number.')
    if value < 1:
        raise RangeError('total_population', 'Total population must be at least 1.')
    if value > MAX_POPULATION:
        raise RangeError('total_population', 'Total population is too large.')
    return value


def clean_image(value) -> Optional[str]:
    url = normalize_optional_text(value)
    if url is None:
        return None
    if len(url) > MAX_IMAGE_LENGTH:
        raise FormatError('image', f"Image URL must be at most {MAX_IMAGE_LENGTH} characters.")
    try:
        _url_validator(url)
    except DjangoValidationError:
        raise FormatError('image', 'Image must be a valid URL.')
    return url


def validate_species(raw: Mapping[str, Any]) -> SpeciesPayload:
    """
    Run every field rule over raw input.

    All fields are checked so the caller can show every inline error at once.

    Raises:
        SpeciesValidationError: if any field fails its rule
    """
    errors: Dict[str, FieldValidationError] = {}
    cleaned: Dict[str, Any] = {}
    rules = {
        'scientific_name': clean_scientific_name,
        'common_name': clean_common_name,
        'kingdom': clean_kingdom,
        'total_population': clean_total_population,
        'image': clean_image,
        'description': normalize_optional_text,
    }

    for field, rule in rules.items():
        try:
            cleaned[field] = rule(raw.get(field))
        except FieldValidationError as e:
            errors[field] = e

    if errors:
        raise SpeciesValidationError(errors)
    return SpeciesPayload(**cleaned)
