"""
Operation registry and dispatcher.

Each catalog entry is an :class:`Operation` pairing a JSON input schema with
a handler. Handlers receive an :class:`OperationContext` and the call's
parameters, perform exactly one remote call (or none, for pure generators)
and return text.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from ..core.client import PveClient
from ..core.session import SessionContext
from ..exceptions import UnknownOperation, ValidationError


@dataclass(frozen=True)
class OperationContext:
    """What a handler may touch during one call."""

    client: PveClient
    session: SessionContext


Handler = Callable[[OperationContext, Dict[str, Any]], str]


@dataclass(frozen=True)
class Operation:
    name: str
    description: str
    handler: Handler
    input_schema: Dict[str, Any] = field(
        default_factory=lambda: {"type": "object", "properties": {}}
    )

    @property
    def required(self) -> List[str]:
        return list(self.input_schema.get("required", []))

    @property
    def properties(self) -> Dict[str, Any]:
        return self.input_schema.get("properties", {})


@dataclass(frozen=True)
class OperationResult:
    text: str
    is_error: bool = False


def schema(properties: Optional[Dict[str, Any]] = None, required: Iterable[str] = ()) -> Dict[str, Any]:
    """Build an object input schema."""
    result: Dict[str, Any] = {"type": "object", "properties": dict(properties or {})}
    required = list(required)
    if required:
        result["required"] = required
    return result


def to_json(data: Any) -> str:
    return json.dumps(data, indent=2)


def task_ack(what: str, upid: Any) -> str:
    """Acknowledge a queued task; callers follow up with the task status tool."""
    return f"{what} initiated. Task: {upid}"


class Registry:
    """Ordered mapping of operation name to :class:`Operation`."""

    def __init__(self, operations: Iterable[Operation] = ()) -> None:
        self._operations: Dict[str, Operation] = {}
        for operation in operations:
            self.register(operation)

    def register(self, operation: Operation) -> None:
        if operation.name in self._operations:
            raise ValueError(f"Operation already registered: {operation.name}")
        self._operations[operation.name] = operation

    def get(self, name: str) -> Operation:
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperation(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self):
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)

    def names(self) -> List[str]:
        return list(self._operations)


class Dispatcher:
    """Routes operation calls to handlers and normalizes failures."""

    def __init__(
        self,
        client: PveClient,
        registry: Registry,
        session: Optional[SessionContext] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.registry = registry
        self.context = OperationContext(client=client, session=session or client.context)
        self.logger = logger or logging.getLogger("pve-mcp.dispatch")

    def list_operations(self) -> List[Operation]:
        return list(self.registry)

    def dispatch(self, name: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Run one operation; errors propagate to the caller."""
        operation = self.registry.get(name)
        args = _normalize(params or {})
        validate(operation, args)
        self.logger.debug("Dispatching %s", name)
        return operation.handler(self.context, args)

    def call(self, name: str, params: Optional[Mapping[str, Any]] = None) -> OperationResult:
        """Run one operation and convert any failure into an error result."""
        try:
            return OperationResult(self.dispatch(name, params))
        except Exception as exc:
            self.logger.warning("Operation %s failed: %s", name, exc)
            return OperationResult(f"Error: {exc}", is_error=True)


def _normalize(params: Mapping[str, Any]) -> Dict[str, Any]:
    # JSON numbers can arrive as floats; ids must render as integers.
    args: Dict[str, Any] = {}
    for key, value in params.items():
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        args[key] = value
    return args


def validate(operation: Operation, args: Mapping[str, Any]) -> None:
    missing = [key for key in operation.required if args.get(key) is None]
    if missing:
        raise ValidationError(
            f"Missing required parameter(s) for {operation.name}: {', '.join(missing)}"
        )

    for key, prop in operation.properties.items():
        allowed = prop.get("enum")
        value = args.get(key)
        if allowed and value is not None and value not in allowed:
            choices = ', '.join(repr(item) for item in allowed)
            raise ValidationError(f"Invalid value for {key!r}: {value!r} (expected one of {choices})")
