"""
Input validation schemas
"""

import json
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


CATEGORIES = (
    'cabin',
    'tent',
    'airstream',
    'cottage',
    'container',
    'caravan',
    'tiny',
    'magic',
    'warehouse',
    'lodge',
)


class SchemaError(ValueError):
    """Raised when submitted data fails validation"""


class ProfileSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    first_name: str = Field(min_length=2, max_length=50)
    last_name: str = Field(min_length=2, max_length=50)
    username: str = Field(min_length=2, max_length=50)


class PropertySchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    name: str = Field(min_length=2, max_length=100)
    tagline: str = Field(min_length=2, max_length=100)
    price: int = Field(ge=0)
    category: str
    description: str
    country: str = Field(min_length=2, max_length=2)
    guests: int = Field(ge=0)
    bedrooms: int = Field(ge=0)
    beds: int = Field(ge=0)
    baths: int = Field(ge=0)
    amenities: list = Field(default_factory=list)

    @field_validator('category')
    @classmethod
    def check_category(cls, value):
        if value.lower() not in CATEGORIES:
            raise ValueError(f'category must be one of: {", ".join(CATEGORIES)}')
        return value.lower()

    @field_validator('description')
    @classmethod
    def check_description_words(cls, value):
        words = len(value.split())
        if words < 10 or words > 1000:
            raise ValueError('description must be between 10 and 1000 words')
        return value

    @field_validator('country')
    @classmethod
    def upper_country(cls, value):
        return value.upper()

    @field_validator('amenities', mode='before')
    @classmethod
    def parse_amenities(cls, value):
        # multipart forms submit the list as a JSON string
        if isinstance(value, str):
            try:
                value = json.loads(value) if value else []
            except ValueError:
                raise ValueError('amenities must be a JSON list')
        return value


class ReviewSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra='ignore')

    property_id: int
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=10, max_length=1000)


def _error_message(error):
    messages = []
    for item in error.errors():
        field = '.'.join(str(part) for part in item['loc'])
        message = item['msg']
        messages.append(f'{field}: {message}' if field else message)
    return ', '.join(messages)


def validate_with_schema(schema, data):
    """Validate data against a schema, raising SchemaError with a readable message"""
    try:
        return schema.model_validate(data or {})
    except ValidationError as e:
        raise SchemaError(_error_message(e)) from e


def validate_image(file, max_size, allowed_extensions):
    """Check an uploaded image's presence, extension and size"""
    if not file or not file.filename:
        raise SchemaError('image: an image file is required')

    extension = os.path.splitext(file.filename)[1].lstrip('.').lower()
    if extension not in allowed_extensions:
        raise SchemaError('image: file must be an image')

    file.stream.seek(0, os.SEEK_END)
    size = file.stream.tell()
    file.stream.seek(0)
    if size > max_size:
        raise SchemaError(f'image: file size must be less than {max_size // (1024 * 1024)} MB')

    return file
