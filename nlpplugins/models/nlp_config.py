"""Configuration model for the NLP transform plugin."""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from nlpplugins.core.exceptions import ConfigurationError
from nlpplugins.core.failures import FailureCollector
from nlpplugins.core.schema import has_field
from nlpplugins.models import macros
from nlpplugins.models.encoding import EncodingType
from nlpplugins.models.error_handling import PROPERTY_ERROR_HANDLING, ErrorHandling

logger = logging.getLogger(__name__)

AUTO_DETECT = "auto-detect"

PROPERTY_SOURCE_FIELD = "sourceField"
PROPERTY_ENCODING = "encoding"
PROPERTY_LANGUAGE_CODE = "languageCode"
PROPERTY_SERVICE_ACCOUNT_FILE_PATH = "serviceFilePath"

_MACRO = {"macro": True}


class NLPConfig(BaseModel):
    """
    Configuration of a transform that sends one text field to the NLP API.

    Values are stored exactly as supplied and decoded on access. Properties
    that accept macros may hold a template such as ``{{ env_var('FIELD') }}``;
    such properties stay unresolved until resolve() renders them, and every
    check on them is skipped until then.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    source_field: str = Field(
        alias=PROPERTY_SOURCE_FIELD,
        description="Field which contains an input text",
        json_schema_extra=_MACRO,
    )
    encoding: Optional[str] = Field(
        default=None,
        alias=PROPERTY_ENCODING,
        description=(
            "Text encoding. Providing it is recommended because the API reports "
            "beginning offsets for tokens and mentions, and languages that "
            "natively use different text encodings may access offsets differently."
        ),
        json_schema_extra=_MACRO,
    )
    language_code: Optional[str] = Field(
        default=None,
        alias=PROPERTY_LANGUAGE_CODE,
        description=(
            "Code of the language of the text data, e.g. en, jp. "
            "If not provided the API detects the language."
        ),
        json_schema_extra=_MACRO,
    )
    error_handling: str = Field(
        alias=PROPERTY_ERROR_HANDLING,
        description="Error handling strategy to use when an NLP API call fails.",
    )
    service_account_file_path: Optional[str] = Field(
        default=None,
        alias=PROPERTY_SERVICE_ACCOUNT_FILE_PATH,
        description=(
            "Path on the local file system of the service account key used for "
            f"authorization. Can be set to '{AUTO_DETECT}' to use the default "
            "credentials of the environment."
        ),
        json_schema_extra=_MACRO,
    )
    macro_properties: frozenset[str] = Field(
        default_factory=frozenset,
        exclude=True,
        description="Names of properties whose value is not resolved yet",
    )

    @model_validator(mode="before")
    @classmethod
    def _mark_unresolved(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        macro_fields = {
            name: field
            for name, field in cls.model_fields.items()
            if _macro_enabled(field.json_schema_extra)
        }
        if "macro_properties" in data:
            explicit = set(data["macro_properties"] or ())
            allowed = {field.alias for field in macro_fields.values()}
            invalid = sorted(explicit - allowed)
            if invalid:
                raise ValueError(
                    f"Properties cannot be late-bound: {', '.join(invalid)}. "
                    f"Macro-enabled properties are {', '.join(sorted(allowed))}"
                )
            return data
        unresolved = set()
        for name, field in macro_fields.items():
            value = data.get(field.alias, data.get(name))
            if macros.contains_macro(value):
                unresolved.add(field.alias)
        logger.debug(
            "Marked unresolved properties",
            extra={"context": {"properties": ",".join(sorted(unresolved)) or "-"}},
        )
        return {**data, "macro_properties": frozenset(unresolved)}

    @classmethod
    def from_properties(cls, properties: Dict[str, Any]) -> "NLPConfig":
        """Create a config from raw plugin properties keyed by property name.

        Resolution state is derived from the values, never read from them.

        Raises:
            ConfigurationError: If the mapping carries 'macro_properties'.
        """
        if "macro_properties" in properties:
            raise ConfigurationError(
                "'macro_properties' is not a plugin property",
                context={"properties": ", ".join(sorted(properties))},
            )
        return cls.model_validate(properties)

    @classmethod
    def describe_properties(cls) -> list[dict[str, Any]]:
        """Return name, description, required and macro flags per property."""
        return [
            {
                "name": field.alias,
                "description": field.description,
                "required": field.is_required(),
                "macro": _macro_enabled(field.json_schema_extra),
            }
            for name, field in cls.model_fields.items()
            if name != "macro_properties"
        ]

    def properties(self) -> Dict[str, Any]:
        """Return the raw property values keyed by property name."""
        return self.model_dump(by_alias=True)

    def contains_macro(self, property_name: str) -> bool:
        """Return True if the property still holds an unresolved template."""
        return property_name in self.macro_properties

    def resolve(
        self, cli_vars: Dict[str, str] | None = None, plugin_name: str = ""
    ) -> "NLPConfig":
        """Render every unresolved property and return the resolved config.

        Raises:
            MacroResolutionError: If a template cannot be rendered.
        """
        if not self.macro_properties:
            return self

        raw = self.properties()
        unresolved = {name: raw[name] for name in self.macro_properties}
        logger.debug(
            "Resolving late-bound properties",
            extra={"context": {"properties": ",".join(sorted(unresolved))}},
        )
        rendered = macros.render_macros(unresolved, cli_vars, plugin_name=plugin_name)
        return type(self).from_properties({**raw, **rendered})

    def get_encoding_type(self) -> EncodingType:
        """
        Raises:
            ConfigurationError: If encoding is not one of NONE, UTF8, UTF16, UTF32.
        """
        return EncodingType.parse(self.encoding)

    def get_error_handling(self) -> ErrorHandling:
        """
        Raises:
            ConfigurationError: If error handling names no supported strategy.
        """
        return ErrorHandling.parse(self.error_handling)

    def get_service_account_file_path(self) -> Optional[str]:
        """Return the key file path, or None to use the default credentials."""
        if (
            self.contains_macro(PROPERTY_SERVICE_ACCOUNT_FILE_PATH)
            or not self.service_account_file_path
            or self.service_account_file_path == AUTO_DETECT
        ):
            return None
        return self.service_account_file_path

    def validate(self, input_schema: Any, collector: FailureCollector) -> None:
        """Check the config against the input schema.

        Never raises for invalid values: every problem is added to the
        collector so they can be reported together. Unresolved properties are
        not checked. The source field check is skipped when no input schema
        is known yet.

        Args:
            input_schema: Schema, pyarrow.Schema or FieldLookup, or None.
            collector: Receives one failure per problem found.
        """
        if input_schema is None:
            _log_skipped(PROPERTY_SOURCE_FIELD, "no input schema")
        elif self.contains_macro(PROPERTY_SOURCE_FIELD):
            _log_skipped(PROPERTY_SOURCE_FIELD, "unresolved")
        else:
            logger.debug(
                "Checking source field against input schema",
                extra={"config_property": PROPERTY_SOURCE_FIELD},
            )
            if not has_field(input_schema, self.source_field):
                collector.add_failure(
                    f"Field '{self.source_field}' does not exist in input schema"
                ).with_config_property(PROPERTY_SOURCE_FIELD)

        if self.contains_macro(PROPERTY_ERROR_HANDLING):
            _log_skipped(PROPERTY_ERROR_HANDLING, "unresolved")
        else:
            logger.debug(
                "Decoding error handling strategy",
                extra={"config_property": PROPERTY_ERROR_HANDLING},
            )
            try:
                self.get_error_handling()
            except ConfigurationError as e:
                collector.add_failure(e.message).with_config_property(
                    PROPERTY_ERROR_HANDLING
                )

        if self.contains_macro(PROPERTY_ENCODING):
            _log_skipped(PROPERTY_ENCODING, "unresolved")
        else:
            logger.debug(
                "Decoding encoding type",
                extra={"config_property": PROPERTY_ENCODING},
            )
            try:
                self.get_encoding_type()
            except ConfigurationError as e:
                collector.add_failure(e.message).with_config_property(
                    PROPERTY_ENCODING
                )


def _log_skipped(property_name: str, reason: str) -> None:
    logger.debug(
        "Skipping check",
        extra={"config_property": property_name, "context": {"reason": reason}},
    )


def _macro_enabled(extra: Any) -> bool:
    return isinstance(extra, dict) and bool(extra.get("macro"))
