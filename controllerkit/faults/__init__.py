"""
Controller faults.

Errors raised by controllers are typed fault objects with a stable code:

- CONFIG faults are raised synchronously and stop start-up (or the render)
- FLOW faults describe request handling problems
- MODEL faults are recovered locally into HTTP error responses
"""

from .core import (
    Fault,
    FaultDomain,
    Severity,
)

from .domains import (
    ConfigFault,
    ConfigInvalidFault,
    ModelMissingFault,
    RenderDataFault,
    PureVirtualCallFault,
    FlowFault,
    UnknownActionFault,
    FormError,
    ModelFault,
    ItemNotFoundFault,
    ItemSavedIncorrectlyFault,
)

__all__ = [
    # Core types
    "Fault",
    "FaultDomain",
    "Severity",

    # Config
    "ConfigFault",
    "ConfigInvalidFault",
    "ModelMissingFault",
    "RenderDataFault",
    "PureVirtualCallFault",

    # Flow
    "FlowFault",
    "UnknownActionFault",
    "FormError",

    # Model
    "ModelFault",
    "ItemNotFoundFault",
    "ItemSavedIncorrectlyFault",
]
