"""
Faults - Domain-specific fault types.

Provides concrete fault classes for each domain:
- CONFIG faults (raised synchronously, never turned into responses)
- FLOW faults
- MODEL faults (recovered into HTTP error responses)
"""

from typing import Any, Optional
from .core import Fault, FaultDomain, Severity


# ============================================================================
# CONFIG Faults
# ============================================================================

class ConfigFault(Fault):
    """Base class for configuration faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.FATAL,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.CONFIG,
            severity=severity,
            retryable=False,
            public=False,
            metadata=metadata,
        )


class ConfigInvalidFault(ConfigFault):
    """Configuration value is invalid."""

    def __init__(self, key: str, reason: str, **kwargs):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Configuration key '{key}' is invalid: {reason}",
            metadata={"key": key, "reason": reason, **kwargs.get("metadata", {})},
        )


class ModelMissingFault(ConfigFault):
    """CRUD controller constructed without a model collaborator."""

    def __init__(self, controller: str = "", **kwargs):
        super().__init__(
            code="MODEL_MISSING",
            message="Model not provided",
            metadata={"controller": controller, **kwargs.get("metadata", {})},
        )


class RenderDataFault(ConfigFault):
    """Template data lacks a key the view cannot render without."""

    def __init__(self, key: str, renderer: str, **kwargs):
        super().__init__(
            code="RENDER_DATA_MISSING",
            message=f'"{key}" is not provided for {renderer}',
            metadata={"key": key, "renderer": renderer, **kwargs.get("metadata", {})},
        )


class PureVirtualCallFault(ConfigFault, NotImplementedError):
    """Abstract method called on a controller that does not override it."""

    def __init__(self, method: str = "", **kwargs):
        super().__init__(
            code="PURE_VIRTUAL_CALL",
            message="Pure virtual call",
            metadata={"method": method, **kwargs.get("metadata", {})},
        )


# ============================================================================
# FLOW Faults
# ============================================================================

class FlowFault(Fault):
    """Base class for request handling faults."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        public: bool = False,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.FLOW,
            severity=severity,
            retryable=False,
            public=public,
            metadata=metadata,
        )


class UnknownActionFault(FlowFault):
    """Controller asked to handle an action it does not declare."""

    def __init__(self, controller: str, action: str, **kwargs):
        super().__init__(
            code="UNKNOWN_ACTION",
            message=f"Controller '{controller}' has no action '{action}'",
            metadata={"controller": controller, "action": action, **kwargs.get("metadata", {})},
        )


class FormError(FlowFault):
    """
    Submitted form failed validation.

    Raised from ``parse_form`` overrides. The form middleware stores it on
    the request as ``parse_error`` and the item view is rendered again with
    the submitted data, so it never escapes a request.

    Attributes:
        errors: Validation errors (string, list or field -> message mapping)
        parsed: Data to show back to the user, usually the submitted form
    """

    def __init__(self, errors: Any, parsed: Any = None, **kwargs):
        super().__init__(
            code="FORM_INVALID",
            message=kwargs.pop("message", None) or f"Form is invalid: {errors}",
            severity=Severity.WARN,
            public=True,
            metadata=kwargs.get("metadata"),
        )
        self.errors = errors
        self.parsed = parsed


# ============================================================================
# MODEL Faults
# ============================================================================

class ModelFault(Fault):
    """Base class for persistence faults surfaced as error responses."""

    def __init__(
        self,
        code: str,
        message: str,
        *,
        severity: Severity = Severity.ERROR,
        public: bool = True,
        metadata: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            code=code,
            message=message,
            domain=FaultDomain.MODEL,
            severity=severity,
            retryable=False,
            public=public,
            metadata=metadata,
        )


class ItemNotFoundFault(ModelFault):
    """Model returned nothing for the requested identifier."""

    def __init__(self, item_id: Any, **kwargs):
        super().__init__(
            code="ITEM_NOT_FOUND",
            message=f"No such item: {item_id}",
            metadata={"id": item_id, **kwargs.get("metadata", {})},
        )


class ItemSavedIncorrectlyFault(ModelFault):
    """Model resolved a create without an identifier on the record."""

    def __init__(self, **kwargs):
        super().__init__(
            code="ITEM_SAVED_INCORRECTLY",
            message="Item saved incorrectly",
            metadata=kwargs.get("metadata"),
        )
