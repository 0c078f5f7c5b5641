"""Field types shared by Azure resource models."""
from typing import Annotated, Dict

from pydantic import AfterValidator

from azurerm_plugin.domain.core.common_types import normalize_location
from azurerm_plugin.domain.validation import (
    as_field_validator,
    string_is_not_empty,
    validate_resource_group_name,
    validate_resource_id,
    validate_servicebus_namespace_name,
    validate_tags,
)

NonEmptyString = Annotated[str, AfterValidator(as_field_validator(string_is_not_empty))]

ResourceGroupName = Annotated[str, AfterValidator(as_field_validator(validate_resource_group_name))]

ServiceBusNamespaceName = Annotated[str, AfterValidator(as_field_validator(validate_servicebus_namespace_name))]

ResourceIdString = Annotated[str, AfterValidator(as_field_validator(validate_resource_id))]

Location = Annotated[
    str,
    AfterValidator(as_field_validator(string_is_not_empty)),
    AfterValidator(normalize_location),
]

TagsMap = Annotated[Dict[str, str], AfterValidator(as_field_validator(validate_tags))]
