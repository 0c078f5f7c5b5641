"""Typed resource configuration and state models.

Each resource type declares a :class:`ResourceModel` subclass. The model is
both the validated user configuration and the local state record for the
resource: handlers populate it from remote responses and clear ``id`` when
the remote object no longer exists.

Field behaviour is declared with :func:`schema_field` metadata:

- ``force_new``: changing the value requires replacing the resource
- ``sensitive``: the value must not be displayed
- ``computed``: the value is set by the remote service, never by the user
- ``case_insensitive``: differences in case alone are not changes
"""
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from azurerm_plugin.domain.core.exceptions import ConfigValidationError


def schema_field(default: Any = ..., *, force_new: bool = False, sensitive: bool = False,
                 computed: bool = False, case_insensitive: bool = False,
                 description: Optional[str] = None, **kwargs) -> Any:
    """Declare a model field with schema metadata."""
    extra = {
        "force_new": force_new,
        "sensitive": sensitive,
        "computed": computed,
        "case_insensitive": case_insensitive,
    }
    if "default_factory" in kwargs:
        return Field(description=description, json_schema_extra=extra, **kwargs)
    return Field(default, description=description, json_schema_extra=extra, **kwargs)


def _field_flag(model_cls: type, name: str, flag: str) -> bool:
    extra = model_cls.model_fields[name].json_schema_extra
    return bool(isinstance(extra, dict) and extra.get(flag))


class ResourceModel(BaseModel):
    """Base class for resource configuration/state records."""

    # Assignment is not validated: values copied back from the remote
    # service are stored as returned.
    model_config = ConfigDict(extra="forbid", validate_assignment=False)

    resource_type: ClassVar[str]

    id: str = Field("", description="Canonical resource ID; empty when not in state")

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "ResourceModel":
        """Validate user configuration, reporting every failing field."""
        errors: Dict[str, List[str]] = {}
        for name in cls.computed_field_names():
            if config.get(name) is not None:
                errors[name] = ["is computed by the remote service and cannot be set"]
        if "id" in config:
            errors["id"] = ["is assigned by the plugin and cannot be set"]

        try:
            model = cls.model_validate({k: v for k, v in config.items() if k not in errors})
        except PydanticValidationError as e:
            for error in e.errors():
                field_name = ".".join(str(part) for part in error["loc"]) or "__root__"
                ctx_error = (error.get("ctx") or {}).get("error")
                message = str(ctx_error) if ctx_error is not None else error["msg"]
                errors.setdefault(field_name, []).append(message)
            raise ConfigValidationError(cls.resource_type, errors) from e

        if errors:
            raise ConfigValidationError(cls.resource_type, errors)
        return model

    @classmethod
    def empty(cls, resource_id: str = "") -> "ResourceModel":
        """Build a state shell holding only an ID, e.g. for read or import."""
        values: Dict[str, Any] = {}
        for name, model_field in cls.model_fields.items():
            if model_field.is_required():
                values[name] = None
            else:
                values[name] = model_field.get_default(call_default_factory=True)
        values["id"] = resource_id
        return cls.model_construct(**values)

    @classmethod
    def from_state(cls, state: Mapping[str, Any]) -> "ResourceModel":
        """Rebuild a model from previously stored state without re-validating it."""
        data = cls.empty(state.get("id") or "")
        for name, value in state.items():
            if name in cls.model_fields and name != "id":
                setattr(data, name, value)
        return data

    @classmethod
    def sensitive_field_names(cls) -> List[str]:
        return [name for name in cls.model_fields if _field_flag(cls, name, "sensitive")]

    @classmethod
    def computed_field_names(cls) -> List[str]:
        return [name for name in cls.model_fields if _field_flag(cls, name, "computed")]

    @classmethod
    def force_new_field_names(cls) -> List[str]:
        return [name for name in cls.model_fields if _field_flag(cls, name, "force_new")]

    @property
    def exists(self) -> bool:
        return bool(self.id)

    def clear(self) -> None:
        """Remove the resource from state."""
        self.id = ""

    def to_state(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", warnings=False)

    def replacement_fields(self, prior: "ResourceModel") -> List[str]:
        """Names of force-new fields whose value differs from ``prior``."""
        changed = []
        for name in self.force_new_field_names():
            new, old = getattr(self, name), getattr(prior, name)
            if old is None:
                continue
            if _field_flag(type(self), name, "case_insensitive") and isinstance(new, str) and isinstance(old, str):
                if new.lower() == old.lower():
                    continue
            elif new == old:
                continue
            changed.append(name)
        return changed
