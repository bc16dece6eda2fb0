"""Render-function skeletons wrapped around the generated body.

Two variants exist:

Standalone (``as_helper=False``) produces the body of
``function(model, html, __vopts, vash)``::

    try {                                    // debug only
    var __vbuffer = html.buffer;
    html.options = __vopts;
    model = model || {};
    with( model ){                           // use_with only
    ...generated body...
    ;(__vopts && __vopts.onRenderEnd && __vopts.onRenderEnd(null, html));
    return (__vopts && __vopts.asContext)
      ? html
      : html.toString();
    }                                        // use_with only
    } catch( e ){                            // debug only
      html.reportError( e, html.vl, html.vc, "<escaped source>" );
    }

Helper (``as_helper=True``) produces a fragment that runs with ``this``
bound to an existing helpers object and reuses its buffer and model.

All identifiers come straight from the GenerationConfig; validate the
config before calling these.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from razorgen.compiler.buffer import BUFFER_NAME
from razorgen.utils.escaping import escape_for_debug

if TYPE_CHECKING:
    from razorgen.config import GenerationConfig

# Per-call options object passed to the standalone render function
OPTIONS_NAME = "__vopts"


def _catch_block(config: GenerationConfig) -> str:
    helpers = config.helpers_name
    source = escape_for_debug(config.source or "")
    return (
        "} catch( e ){ \n"
        f'  {helpers}.reportError( e, {helpers}.vl, {helpers}.vc, "{source}" ); \n'
        "} \n"
    )


def head(config: GenerationConfig) -> str:
    """Preamble of a standalone render function."""
    helpers = config.helpers_name
    model = config.model_name
    parts: list[str] = []
    if config.debug:
        parts.append("try { \n")
    parts.append(f"var {BUFFER_NAME} = {helpers}.buffer; \n")
    parts.append(f"{helpers}.options = {OPTIONS_NAME}; \n")
    parts.append(f"{model} = {model} || {{}}; \n")
    if config.use_with:
        parts.append(f"with( {model} ){{ \n")
    return "".join(parts)


def tail(config: GenerationConfig) -> str:
    """Epilogue of a standalone render function."""
    helpers = config.helpers_name
    parts: list[str] = []
    if config.simple:
        parts.append(f'return {helpers}.buffer.join(""); \n')
    else:
        parts.append(
            f";({OPTIONS_NAME} && {OPTIONS_NAME}.onRenderEnd"
            f" && {OPTIONS_NAME}.onRenderEnd(null, {helpers})); \n"
        )
        parts.append(f"return ({OPTIONS_NAME} && {OPTIONS_NAME}.asContext) \n")
        parts.append(f"  ? {helpers} \n")
        parts.append(f"  : {helpers}.toString(); \n")
    if config.use_with:
        parts.append("} \n")
    if config.debug:
        parts.append(_catch_block(config))
    return "".join(parts)


def helper_head(config: GenerationConfig) -> str:
    """Preamble of a helper fragment: alias the invoking helpers' state."""
    parts: list[str] = []
    if config.debug:
        parts.append("try { \n")
    parts.append(f"var {BUFFER_NAME} = this.buffer; \n")
    parts.append(f"var {config.model_name} = this.model; \n")
    parts.append(f"var {config.helpers_name} = this; \n")
    return "".join(parts)


def helper_tail(config: GenerationConfig) -> str:
    """Epilogue of a helper fragment (only non-empty in debug mode)."""
    return _catch_block(config) if config.debug else ""


def wrap(body: str, config: GenerationConfig) -> str:
    """Surround a generated body with the skeleton ``config`` selects."""
    if config.as_helper:
        return helper_head(config) + body + helper_tail(config)
    return head(config) + body + tail(config)
