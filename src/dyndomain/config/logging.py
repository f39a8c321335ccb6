"""structlog configuration for dyndomain.

Two output modes, both on stderr:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Library modules log through stdlib ``logging``. Values passed as
``extra=`` (or as structlog keyword arguments) that are domains are
rendered in interval notation with the configured separator, so JSON
logs stay serializable and read the same as command output.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from dyndomain.domain.algebra import DEFAULT_SEPARATOR, Domain


def domain_notation(separator: str = DEFAULT_SEPARATOR) -> structlog.types.Processor:
    """Processor replacing ``Domain`` values in an event with their notation."""

    def render(
        _logger: Any, _method: str, event_dict: MutableMapping[str, Any]
    ) -> MutableMapping[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, Domain):
                event_dict[key] = value.notation(separator)
        return event_dict

    return render


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    separator: str = DEFAULT_SEPARATOR,
) -> None:
    """Configure structlog processors and route all output to stderr.

    Args:
        verbose: DEBUG for ``dyndomain.*`` loggers. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
        separator: Separator used when rendering domains in log events.
    """
    shared: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    notation = domain_notation(separator)

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared,
            notation,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[*shared, structlog.stdlib.ExtraAdder(), notation],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)
    logging.getLogger("dyndomain").setLevel(logging.DEBUG if verbose else logging.WARNING)
