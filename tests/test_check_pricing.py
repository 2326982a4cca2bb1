from __future__ import annotations

import json

import check_pricing


def test_summary_for_country_with_fallback(capsys) -> None:
    assert check_pricing.main(["--country", "th", "--compatible"]) == 0
    out = capsys.readouterr().out
    assert "Location: Thailand (TH)" in out
    assert "Monthly: $3.90" in out
    assert "Gateway fallback: THB -> USD" in out
    assert "Payment methods: card" in out


def test_json_output_for_language(capsys) -> None:
    assert check_pricing.main(["--language", "en-IN", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["pricing"]["currency"] == "INR"
    assert payload["paymentMethods"]["upi"] is True


def test_ip_lookup_goes_through_provider(capsys, geo_api) -> None:
    geo_api.responses["8.8.8.8"] = {"country_name": "Japan", "country_code": "JP", "currency": "JPY"}
    assert check_pricing.main(["--ip", "8.8.8.8"]) == 0
    assert "Monthly: ¥660" in capsys.readouterr().out
    assert geo_api.calls[0]["url"] == "https://ipapi.co/8.8.8.8/json/"
