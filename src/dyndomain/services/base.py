"""BaseService — foundation for dyndomain services.

Every service receives the resolved :class:`DomainSettings` at
construction time and reads notation and enumeration limits from it.
Successful results carry where those settings came from: ``meta["config"]``
names the TOML file and its sections, and unknown keys in that file
become warnings.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from dyndomain.services.result import ServiceResult

if TYPE_CHECKING:
    from dyndomain.config.settings import DomainSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class DomainService(BaseService):
            def render(self, ...) -> ServiceResult:
                separator = self._settings.notation.separator
                ...
                return self._success("render", data)
    """

    def __init__(self, settings: DomainSettings) -> None:
        self._settings = settings

    def _success(
        self,
        op: str,
        data: dict[str, Any],
        *,
        warnings: Sequence[str] = (),
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        origin = self._settings.config_origin
        merged = dict(meta or {})
        described = origin.describe()
        if described:
            merged["config"] = described
        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=[*origin.warnings(), *warnings],
            meta=merged or None,
        )
