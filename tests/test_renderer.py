from __future__ import annotations

from fakes import B_FORWARD, B_RECORD, active

from domain_sync.domain import (
    AuthorizationCode,
    DnsSettings,
    DomainForward,
    EnrichedRegistration,
    GoogleDomainsDns,
    Record,
    Registration,
)
from domain_sync.rendering import ConfigRenderer, quote


def _enriched(registration: Registration, code: str) -> EnrichedRegistration:
    return EnrichedRegistration(
        registration=registration,
        authorization_code=AuthorizationCode(domain_name=registration.domain_name, code=code),
    )


def _with_dns(
    domain_name: str,
    records: tuple[Record, ...],
    forwards: tuple[DomainForward, ...] = (),
) -> Registration:
    return Registration(
        domain_name=domain_name,
        state="ACTIVE",
        dns_settings=DnsSettings(
            google_domains_dns=GoogleDomainsDns(records=records, domain_forwards=forwards),
            google_domains_redirects_data_available=bool(forwards),
        ),
    )


def test_render_full_block() -> None:
    block = ConfigRenderer().render(
        _enriched(_with_dns("b.com", (B_RECORD,), (B_FORWARD,)), "CODE-B")
    )

    assert block == "\n".join(
        [
            '["b.com"] {',
            '  authCode = "CODE-B"',
            "  redirect {",
            '    to = "https://b.com"',
            "    aliases {",
            '      "www"',
            "    }",
            "  }",
            "  records {",
            "    new {",
            '      sub = "b.com"',
            '      type = "A"',
            "      values {",
            '        "1.2.3.4"',
            "      }",
            "    }",
            "  }",
            "}",
        ]
    )


def test_render_domain_without_dns_has_empty_records() -> None:
    block = ConfigRenderer().render(_enriched(active("a.com"), "CODE-A"))

    assert block == '["a.com"] {\n  authCode = "CODE-A"\n  records {\n  }\n}'


def test_rrdata_values_are_one_per_line_in_sorted_order() -> None:
    record = Record(name="b.com.", type="TXT", ttl=60, rrdata=frozenset({"v=spf1 -all", "a", "m"}))
    block = ConfigRenderer().render(_enriched(_with_dns("b.com", (record,)), "X"))

    lines = [line.strip() for line in block.splitlines()]
    start = lines.index("values {") + 1
    assert lines[start : start + 3] == ['"a"', '"m"', '"v=spf1 -all"']


def test_quotes_and_backslashes_are_escaped() -> None:
    assert quote('say "hi"') == '"say \\"hi\\""'
    assert quote("C:\\dir") == '"C:\\\\dir"'

    record = Record(name="txt.b.com.", type="TXT", ttl=60, rrdata=frozenset({'"quoted"'}))
    block = ConfigRenderer().render(_enriched(_with_dns("b.com", (record,)), 'co"de'))

    assert 'authCode = "co\\"de"' in block
    assert '"\\"quoted\\""' in block


def test_render_all_preserves_input_order() -> None:
    items = [_enriched(active(name), "C") for name in ("z.com", "a.com", "m.com")]

    blocks = ConfigRenderer().render_all(items)

    assert [block.splitlines()[0] for block in blocks] == [
        '["z.com"] {',
        '["a.com"] {',
        '["m.com"] {',
    ]


def test_custom_indent() -> None:
    block = ConfigRenderer(indent="\t").render(_enriched(active("a.com"), "CODE-A"))

    assert block.splitlines()[1] == '\tauthCode = "CODE-A"'
