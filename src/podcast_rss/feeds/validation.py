"""Validation rules shared by the Podcast and Episode entities.

Every function either returns ``None`` or raises
:class:`~podcast_rss.utils.errors.ValidationError` with a message naming the
offending value and the rule it breaks.
"""

import re
from collections.abc import Iterable, Sized
from enum import Enum
from typing import Any

from pydantic import AnyUrl, EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from podcast_rss.utils.errors import MissingValueError, ValidationError

DEFAULT_MAX_LENGTH = 255
# Apple allows 4000 bytes, roughly 3600 characters
DEFAULT_MAX_HTML_LENGTH = 3600

LANGUAGE_PATTERN = re.compile(r"[a-z]{2}(-[A-Z]{2})?")
TAG_PATTERN = re.compile(r"<[^>]*>")
# Characters outside the XML 1.0 Char production
INVALID_XML_CHARS = re.compile(r"[^\t\n\r\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")

_url_adapter = TypeAdapter(AnyUrl)
_email_adapter = TypeAdapter(EmailStr)


def strip_tags(html: str) -> str:
    """Remove all markup tags from an HTML string."""
    return TAG_PATTERN.sub("", html)


def validate_xml_text(text: Any) -> None:
    """Make sure the value is a string that an XML document can hold.

    Raises:
        ValidationError: If the value is not a string, or contains control
            characters or other code points XML does not allow
    """
    if not isinstance(text, str):
        raise ValidationError(f"Expected a string, got {text!r} instead")

    match = INVALID_XML_CHARS.search(text)
    if match:
        raise ValidationError(
            f"Passed string contains the character {match.group()!r}, "
            "which is not allowed in XML"
        )


def validate_is_one_of(value: Any, valid_values: Iterable[Any]) -> None:
    """Make sure the value is among the valid values.

    Comparison is type-preserving: ``1`` never matches ``"1"``. Enum members
    are compared by their raw value.

    Raises:
        ValidationError: If the value is not a member of the set
    """
    valid_values = [v.value if isinstance(v, Enum) else v for v in valid_values]
    candidate = value.value if isinstance(value, Enum) else value

    if not any(type(candidate) is type(v) and candidate == v for v in valid_values):
        valid = ", ".join(str(v) for v in valid_values)
        raise ValidationError(f"Invalid value '{candidate}', expected one of: {valid}")


def validate_max_length(text: str, max_length: int = DEFAULT_MAX_LENGTH) -> None:
    """Make sure the trimmed text does not exceed max_length characters.

    Raises:
        ValidationError: If the text is not valid XML text or is too long
    """
    validate_xml_text(text)
    if len(text.strip()) > max_length:
        raise ValidationError(
            f"Passed string surpasses the maximum length of {max_length} characters."
        )


def validate_max_length_html(html: str, max_length: int = DEFAULT_MAX_HTML_LENGTH) -> None:
    """Make sure the visible text of an HTML string is not too long.

    Tags are stripped before counting.

    Raises:
        ValidationError: If the visible text is too long
    """
    validate_xml_text(html)
    validate_max_length(strip_tags(html), max_length)


def validate_email(email: str) -> None:
    """Make sure the text is a syntactically valid e-mail address.

    Raises:
        ValidationError: If the address is not valid
    """
    validate_xml_text(email)
    try:
        _email_adapter.validate_python(email)
    except PydanticValidationError as e:
        raise ValidationError(f"'{email}' is not a valid e-mail address") from e


def validate_url(url: str) -> None:
    """Make sure the text is a syntactically valid absolute URL.

    Raises:
        ValidationError: If the URL is not valid
    """
    validate_xml_text(url)
    try:
        _url_adapter.validate_python(url)
    except PydanticValidationError as e:
        raise ValidationError(f"'{url}' is not a valid URL string") from e


def validate_is_positive(number: int) -> None:
    """Make sure the number is a positive integer.

    Raises:
        ValidationError: If the number is not an integer greater than zero
    """
    if isinstance(number, bool) or not isinstance(number, int) or number <= 0:
        raise ValidationError(f"Expected a positive integer, got '{number}' instead")


def validate_language(language: str) -> None:
    """Make sure the text is an ISO 639-1 language tag, e.g. "en" or "en-US".

    Raises:
        ValidationError: If the tag is malformed
    """
    validate_xml_text(language)
    if not LANGUAGE_PATTERN.fullmatch(language):
        raise ValidationError(
            f"'{language}' is not a valid ISO 639 language code, expected e.g. 'en' or 'en-US'"
        )


def validate_has_value(property_name: str, value: Any) -> None:
    """Make sure a property holds a non-empty value before serialization.

    Raises:
        MissingValueError: If the value is None, a blank string, or falsy
    """
    if isinstance(value, str):
        missing = value.strip() == ""
    else:
        missing = not value

    if missing:
        raise MissingValueError(f"Missing value for {property_name}, cannot serialize.")


def validate_min_size(property_name: str, collection: Sized, min_size: int) -> None:
    """Make sure a collection holds at least min_size elements.

    Raises:
        MissingValueError: If the collection is too small
    """
    size = len(collection)

    if size < min_size:
        raise MissingValueError(
            f"Expected at least {min_size} elements for {property_name}, got {size} instead."
        )
