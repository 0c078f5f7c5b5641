"""Field validators.

Every validator takes the value and the field key and returns a tuple of
``(warnings, errors)``. An empty error list means the value is valid.
Validators never raise; :func:`as_field_validator` adapts them for use on
pydantic fields.
"""
import re
from typing import Any, Callable, List, Mapping, Tuple

from pydantic import ValidationInfo

from azurerm_plugin.domain.core.exceptions import InvalidResourceIdError
from azurerm_plugin.domain.resource_id import parse_resource_id
from azurerm_plugin.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

ValidateResult = Tuple[List[str], List[str]]
Validator = Callable[[Any, str], ValidateResult]

RESOURCE_GROUP_NAME_MAX_LENGTH = 90
# https://docs.microsoft.com/en-us/rest/api/resources/resourcegroups/createorupdate
RESOURCE_GROUP_NAME_RE = re.compile(r'[-A-Za-z0-9_.()]+')

SERVICEBUS_NAMESPACE_NAME_RE = re.compile(r'[a-zA-Z][-a-zA-Z0-9]{4,48}[a-zA-Z0-9]')
SERVICEBUS_NAMESPACE_ILLEGAL_SUFFIXES = ("-sb", "-mgmt")

TAGS_MAX_COUNT = 50
TAG_KEY_MAX_LENGTH = 512
TAG_VALUE_MAX_LENGTH = 256


def validate_resource_group_name(value: Any, key: str) -> ValidateResult:
    warnings: List[str] = []
    errors: List[str] = []

    if not isinstance(value, str):
        return warnings, [f"expected type of {key!r} to be string"]

    if len(value.encode("utf-8")) > RESOURCE_GROUP_NAME_MAX_LENGTH:
        errors.append(f"{key!r} may not exceed {RESOURCE_GROUP_NAME_MAX_LENGTH} characters in length")

    if value.endswith("."):
        errors.append(f"{key!r} may not end with a period")

    if len(value) == 0:
        errors.append(f"{key!r} cannot be blank")
    elif not RESOURCE_GROUP_NAME_RE.fullmatch(value):
        errors.append(
            f"{key!r} may only contain alphanumeric characters, dash, underscores, parentheses and periods"
        )

    return warnings, errors


def validate_servicebus_namespace_name(value: Any, key: str) -> ValidateResult:
    if not isinstance(value, str):
        return [], [f"expected type of {key!r} to be string"]

    errors: List[str] = []
    if not SERVICEBUS_NAMESPACE_NAME_RE.fullmatch(value):
        errors.append(
            f"{key!r} can contain only letters, numbers, and hyphens. The namespace must start "
            f"with a letter, and it must end with a letter or number and be between 6 and 50 "
            f"characters long."
        )

    if value.endswith(SERVICEBUS_NAMESPACE_ILLEGAL_SUFFIXES):
        errors.append(f"{key!r} cannot end with a hyphen, -sb, or -mgmt")

    return [], errors


def string_is_not_empty(value: Any, key: str) -> ValidateResult:
    if not isinstance(value, str):
        return [], [f"expected type of {key!r} to be string"]
    if value.strip() == "":
        return [], [f"expected {key!r} to not be an empty string, got {value!r}"]
    return [], []


def validate_resource_id(value: Any, key: str) -> ValidateResult:
    """Accept any string that parses as an ARM resource ID."""
    if not isinstance(value, str):
        return [], [f"expected type of {key!r} to be string"]
    try:
        parse_resource_id(value)
    except InvalidResourceIdError as e:
        return [], [f"Can not parse {key!r} as a resource id: {e}"]
    return [], []


def validate_tags(value: Any, key: str) -> ValidateResult:
    if not isinstance(value, Mapping):
        return [], [f"expected type of {key!r} to be a map"]

    errors: List[str] = []
    if len(value) > TAGS_MAX_COUNT:
        errors.append(f"a maximum of {TAGS_MAX_COUNT} tags can be applied to each ARM resource")

    for tag_key, tag_value in value.items():
        if len(tag_key) > TAG_KEY_MAX_LENGTH:
            errors.append(f"the maximum length for a tag key is {TAG_KEY_MAX_LENGTH} characters: {tag_key!r} is {len(tag_key)} characters")
        if tag_value is not None and len(str(tag_value)) > TAG_VALUE_MAX_LENGTH:
            errors.append(
                f"the maximum length for a tag value is {TAG_VALUE_MAX_LENGTH} characters: "
                f"the value for {tag_key!r} is {len(str(tag_value))} characters"
            )

    return [], errors


def as_field_validator(validator: Validator) -> Callable[[Any, ValidationInfo], Any]:
    """Wrap a ``(warnings, errors)`` validator as a pydantic after-validator."""
    def _validate(value: Any, info: ValidationInfo) -> Any:
        key = info.field_name or "value"
        warnings, errors = validator(value, key)
        for warning in warnings:
            logger.warning("Validation warning", field=key, warning=warning)
        if errors:
            raise ValueError("; ".join(errors))
        return value

    _validate.__name__ = validator.__name__
    return _validate
