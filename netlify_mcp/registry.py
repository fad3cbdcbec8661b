"""Tool registry — maps tool names to their specs with schema validation.

The ``Registry`` is a plain class (not a singleton) so tests can create
fresh instances.  ``netlify_mcp.tools`` builds the default one from the
fixed tool catalogue; it is read-only after that.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable

from pydantic import BaseModel, ValidationError

from netlify_mcp.contracts import OutboundRequest
from netlify_mcp.errors import InvalidParams, ToolNotFound

RequestBuilder = Callable[[Any], OutboundRequest]
ResponseShaper = Callable[[Any, Any], dict[str, Any]]


@dataclass(frozen=True)
class ToolSpec:
    """Everything the dispatcher needs to serve one tool.

    ``operation`` names the action in failure messages
    (``"Failed to <operation>: ..."``).  When ``not_found_is_invalid`` is
    set, a remote 404 is the caller's fault (unknown site), not ours.
    """

    name: str
    description: str
    request_model: type[BaseModel]
    build: RequestBuilder
    shape: ResponseShaper
    operation: str
    not_found_is_invalid: bool = False

    @cached_property
    def definition(self) -> dict[str, Any]:
        """MCP discovery definition derived from the request model."""
        return _build_tool_definition(self.name, self.description, self.request_model)

    def validate(self, arguments: Any) -> BaseModel:
        """Return the typed argument record or raise ``InvalidParams``.

        Only the first violation (in field order) is reported.
        """
        try:
            return self.request_model.model_validate(
                {} if arguments is None else arguments
            )
        except ValidationError as exc:
            raise _first_violation(exc, self.request_model) from None


class Registry:
    """Closed tool registry.

    Usage::

        reg = Registry()
        reg.register(ToolSpec(name="getSite", ...))
        spec = reg.lookup("getSite")
    """

    def __init__(self) -> None:
        self._tools: dict[str, ToolSpec] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, spec: ToolSpec) -> None:
        """Register *spec*.

        Raises ``ValueError`` if a tool with the same name is already
        registered.
        """
        if spec.name in self._tools:
            raise ValueError(f"Tool '{spec.name}' is already registered")
        self._tools[spec.name] = spec

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, name: str) -> ToolSpec:
        """Return the spec for *name* or raise ``ToolNotFound``."""
        spec = self._tools.get(name)
        if spec is None:
            raise ToolNotFound(name, self.tool_names())
        return spec

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def list_tools(self) -> list[dict[str, Any]]:
        """Return MCP tool definitions for all registered tools."""
        return [spec.definition for spec in self._tools.values()]

    def has_tool(self, name: str) -> bool:
        return name in self._tools

    def tool_names(self) -> list[str]:
        return list(self._tools.keys())


# -----------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------

_SCHEMA_KEYS = (
    "type",
    "description",
    "default",
    "enum",
    "items",
    "additionalProperties",
    "minimum",
    "maximum",
    "minLength",
    "pattern",
)


def _first_violation(
    exc: ValidationError, request_model: type[BaseModel]
) -> InvalidParams:
    """Turn the first pydantic error into a field-identifying message.

    A null or empty value only counts as missing for required fields.
    """
    err = exc.errors()[0]
    loc = [str(part) for part in err.get("loc", ())]
    field_name = loc[0] if loc else "arguments"
    where = ".".join(loc) or "arguments"
    required = {
        key
        for name, info in request_model.model_fields.items()
        if info.is_required()
        for key in (name, info.alias or name)
    }

    blank = len(loc) == 1 and err.get("input") in (None, "")
    if err["type"] == "missing" or (blank and field_name in required):
        return InvalidParams(f"Missing required parameter: {where}", field=field_name)

    reason = err["msg"]
    if err["type"] == "value_error":
        reason = str(err.get("ctx", {}).get("error", reason))
    return InvalidParams(f"Invalid parameter '{where}': {reason}", field=field_name)


def _clean_property(prop_schema: dict[str, Any]) -> dict[str, Any]:
    # Optional fields come out of pydantic as anyOf[<type>, null]
    if "anyOf" in prop_schema:
        branches = [b for b in prop_schema["anyOf"] if b.get("type") != "null"]
        merged = {**(branches[0] if branches else {}), **prop_schema}
        merged.pop("anyOf", None)
        prop_schema = merged

    cleaned = {k: v for k, v in prop_schema.items() if k in _SCHEMA_KEYS}
    if cleaned.get("default", "") is None:
        cleaned.pop("default")
    if "type" not in cleaned:
        cleaned["type"] = "string"
    return cleaned


def _build_tool_definition(
    name: str, description: str, request_model: type[BaseModel]
) -> dict[str, Any]:
    """Build an MCP tool definition from a Pydantic model."""
    schema = request_model.model_json_schema(by_alias=True)
    properties = schema.get("properties", {})
    required = schema.get("required", [])

    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "type": "object",
            "properties": {
                prop_name: _clean_property(prop_schema)
                for prop_name, prop_schema in properties.items()
            },
            "required": required,
        },
    }
