"""Node runtime integration."""

from fedimintd_mobile.integrations.node_runtime.abc import (
    NodeRuntime,
    NodeRuntimeConfig,
    NodeStartError,
)
from fedimintd_mobile.integrations.node_runtime.fake import FakeNodeRuntime

__all__ = ["FakeNodeRuntime", "NodeRuntime", "NodeRuntimeConfig", "NodeStartError"]
