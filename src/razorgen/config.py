"""Generation options for the razorgen compiler.

A GenerationConfig is built once per template, usually by merging
compiler-wide settings with per-template overrides, and is read-only for
the whole generation pass:

    >>> settings = {"htmlEscape": True, "helpersName": "html", "useWith": False}
    >>> config = GenerationConfig.from_options(settings, debug=True, source="<p>@x</p>")
    >>> config.debug, config.helpers_name
    (True, 'html')

"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from razorgen.exceptions import ConfigurationError
from razorgen.utils.escaping import is_identifier

logger = logging.getLogger(__name__)

# Option names used by the surrounding compiler/runtime → field names
_OPTION_ALIASES: dict[str, str] = {
    "debug": "debug",
    "useWith": "use_with",
    "asHelper": "as_helper",
    "simple": "simple",
    "htmlEscape": "html_escape",
    "helpersName": "helpers_name",
    "modelName": "model_name",
    "source": "source",
}


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Options controlling one generation pass.

    Attributes:
        debug: Wrap the render body in try/catch and embed the escaped
            template source for runtime error reports
        use_with: Open a ``with(model){...}`` scope so bare identifiers
            resolve against the model
        as_helper: Emit a helper fragment instead of a standalone render
            function
        simple: Return the joined buffer instead of running the
            onRenderEnd hook and the context/string return
        html_escape: Escape interpolated expression output
        helpers_name: Identifier of the runtime helpers object
        model_name: Identifier of the data model
        source: Original template text, required when debug is set
    """

    debug: bool = False
    use_with: bool = False
    as_helper: bool = False
    simple: bool = False
    html_escape: bool = True
    helpers_name: str = "html"
    model_name: str = "model"
    source: str | None = None

    @classmethod
    def from_options(
        cls, options: Mapping[str, Any] | None = None, /, **overrides: Any
    ) -> GenerationConfig:
        """Build a config from an options mapping plus overrides.

        Keys may be field names (``use_with``) or the camelCase option names
        used by the runtime (``useWith``). Unknown keys in ``options`` are
        ignored, so a full compiler options object can be passed as is.
        Overrides are applied after ``options`` and must be known names.

        Raises:
            ConfigurationError: An override names no option
        """
        values: dict[str, Any] = {}
        for key, value in (options or {}).items():
            field_name = _OPTION_ALIASES.get(key, key)
            if field_name in _FIELD_NAMES:
                values[field_name] = value
            else:
                logger.debug("Ignoring unknown generation option %r", key)

        for key, value in overrides.items():
            field_name = _OPTION_ALIASES.get(key, key)
            if field_name not in _FIELD_NAMES:
                raise ConfigurationError(f"Unknown generation option {key!r}", field=key)
            values[field_name] = value
        return cls(**values)

    def derive(self, **changes: Any) -> GenerationConfig:
        """Return a copy with ``changes`` applied (configs are immutable)."""
        unknown = set(changes) - _FIELD_NAMES
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration field(s): {', '.join(sorted(unknown))}",
                field=sorted(unknown)[0],
            )
        return dataclasses.replace(self, **changes)

    def validate(self) -> None:
        """Check that this config can produce well-formed source.

        Raises:
            ConfigurationError: An identifier is not valid JavaScript, the
                two identifiers collide, or debug is set without source
        """
        for field_name in ("helpers_name", "model_name"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not is_identifier(value):
                raise ConfigurationError(
                    f"Invalid {field_name} {value!r}: not a JavaScript identifier",
                    field=field_name,
                )
        if self.helpers_name == self.model_name:
            raise ConfigurationError(
                f"helpers_name and model_name must differ (both {self.model_name!r})",
                field="model_name",
            )
        if self.debug and not isinstance(self.source, str):
            raise ConfigurationError(
                "debug requires the original template source", field="source"
            )


_FIELD_NAMES: frozenset[str] = frozenset(f.name for f in dataclasses.fields(GenerationConfig))
