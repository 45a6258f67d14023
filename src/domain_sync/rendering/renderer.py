"""Configuration block rendering for enriched registrations."""

from __future__ import annotations

from collections.abc import Iterable

from domain_sync.domain import DomainForward, EnrichedRegistration, Record


def quote(value: str) -> str:
    """Return ``value`` as a double-quoted, escaped string literal."""

    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class ConfigRenderer:
    """Render one configuration block per enriched registration."""

    def __init__(self, indent: str = "  ") -> None:
        self._indent = indent

    def render(self, enriched: EnrichedRegistration) -> str:
        registration = enriched.registration
        body: list[str] = [f"authCode = {quote(enriched.authorization_code.code)}"]
        for forward in registration.domain_forwards:
            body.extend(self._redirect(forward))
        body.append("records {")
        for record in registration.records:
            body.extend(self._nest(self._record(record)))
        body.append("}")

        lines = [f"[{quote(registration.domain_name)}] {{", *self._nest(body), "}"]
        return "\n".join(lines)

    def render_all(self, enriched: Iterable[EnrichedRegistration]) -> list[str]:
        return [self.render(item) for item in enriched]

    def _redirect(self, forward: DomainForward) -> list[str]:
        return [
            "redirect {",
            *self._nest(
                [
                    f"to = {quote(forward.target_uri)}",
                    "aliases {",
                    *self._nest([quote(forward.subdomain)]),
                    "}",
                ]
            ),
            "}",
        ]

    def _record(self, record: Record) -> list[str]:
        # rrdata is an unordered set upstream
        values = [quote(value) for value in sorted(record.rrdata)]
        return [
            "new {",
            *self._nest(
                [
                    f"sub = {quote(record.name)}",
                    f"type = {quote(record.type)}",
                    "values {",
                    *self._nest(values),
                    "}",
                ]
            ),
            "}",
        ]

    def _nest(self, lines: Iterable[str]) -> list[str]:
        return [f"{self._indent}{line}" for line in lines]


__all__ = ["ConfigRenderer", "quote"]
