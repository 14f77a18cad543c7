"""Centralized instrumentation for inistore.

(c) Mike Casale 2025.
Licensed under the MIT License.
"""

from __future__ import annotations as _annotations

# Standard library (alphabetical)
import os
from typing import Literal

# Third-party (alphabetical)
import logfire

__all__ = ("configure_instrumentation",)


def configure_instrumentation(
    *,
    service_name: str = "inistore",
    environment: str | None = None,
    send_to_logfire: bool | Literal["if-token-present"] | None = "if-token-present",
    console: bool = True,
) -> None:
    """Configure global instrumentation settings.

    This function should be called once at application startup.

    Args:
        service_name: Name of the service for tracing.
        environment: Deployment environment (dev, staging, prod).
        send_to_logfire: Whether to send telemetry to Logfire.
        console: Whether to echo spans and logs to the console.
    """
    environment = environment or os.getenv("ENVIRONMENT", "development")

    logfire.configure(
        service_name=service_name,
        environment=environment,
        send_to_logfire=send_to_logfire,
        console=None if console else False,
    )
