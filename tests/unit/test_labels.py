"""Unit tests for label tables, formatting and the translation capability."""

from datetime import timezone

import pytest

from invoice_engines.formatting import (
    format_amount,
    format_deduction,
    format_timestamp,
)
from invoice_engines.labels import (
    DEFAULT_LABELS,
    PERIOD_LABELS,
    STATUS_LABELS,
    LabelKey,
    label,
    period_label,
    status_label,
)
from invoice_kernel.domain.codes import OrderStatus, PeriodCode
from invoice_kernel.domain.translation import (
    CallableTranslator,
    NullTranslator,
    as_translator,
    translate_or_default,
)

NULL = NullTranslator()


class TestFormatAmount:
    def test_minor_units(self):
        assert format_amount(9000, "¥") == "¥90.00"

    def test_none_is_zero(self):
        assert format_amount(None, "¥") == "¥0.00"

    def test_small_amount(self):
        assert format_amount(5, "¥") == "¥0.05"

    def test_large_amount_has_no_exponent(self):
        assert format_amount(123456789012, "¥") == "¥1234567890.12"

    def test_deduction(self):
        assert format_deduction(1000, "¥") == "-¥10.00"


class TestFormatTimestamp:
    def test_utc_default(self):
        assert format_timestamp(1705314600) == "2024/01/15 10:30"

    def test_explicit_zone(self):
        assert format_timestamp(1705314600, timezone.utc) == "2024/01/15 10:30"

    @pytest.mark.parametrize("value", [None, 0])
    def test_absent(self, value):
        assert format_timestamp(value) == "-"


class TestPeriodLabel:
    @pytest.mark.parametrize(
        "code, expected",
        [
            ("month_price", "Monthly"),
            ("quarter_price", "Quarterly"),
            ("half_year_price", "Semi-annual"),
            ("year_price", "Annual"),
            ("two_year_price", "Biennial"),
            ("three_year_price", "Triennial"),
            ("onetime_price", "One-time"),
            ("reset_price", "Data reset pack"),
            ("deposit", "Top-up"),
        ],
    )
    def test_default_labels(self, code, expected):
        assert period_label(code, NULL) == expected

    def test_every_period_code_has_a_label(self):
        assert set(PERIOD_LABELS) == {code.value for code in PeriodCode}

    def test_unknown_code_is_raw(self):
        assert period_label("zzz", NULL) == "zzz"

    @pytest.mark.parametrize("value", [None, ""])
    def test_absent_is_dash(self, value):
        assert period_label(value, NULL) == "-"

    def test_translated(self):
        translator = CallableTranslator({"payment.period_types.deposit": "充值"}.get)
        assert period_label("deposit", translator) == "充值"


class TestStatusLabel:
    @pytest.mark.parametrize(
        "status, expected",
        [
            (0, "Pending"),
            (1, "Processing"),
            (2, "Cancelled"),
            (3, "Completed"),
            (4, "Discounted"),
        ],
    )
    def test_default_labels(self, status, expected):
        assert status_label(status, NULL) == expected

    def test_every_status_has_a_label(self):
        assert set(STATUS_LABELS) == {status.value for status in OrderStatus}

    @pytest.mark.parametrize("status", [9, -1, None])
    def test_unknown(self, status):
        assert status_label(status, NULL) == "Unknown status"

    def test_unknown_translated(self):
        translator = CallableTranslator({"payment.status.unknown": "未知状态"}.get)
        assert status_label(9, translator) == "未知状态"


class TestDefaultLabels:
    def test_every_key_has_a_default(self):
        keys = {
            value for name, value in vars(LabelKey).items()
            if not name.startswith("_")
        }
        assert keys == set(DEFAULT_LABELS)

    def test_label_lookup(self):
        assert label(NULL, LabelKey.PAYMENT_METHOD) == "Via"
        assert label(NULL, LabelKey.BALANCE_USED) == "Balance Used"


class TestTranslation:
    def test_none_becomes_null_translator(self):
        assert isinstance(as_translator(None), NullTranslator)

    def test_callable_is_wrapped(self):
        translator = as_translator(lambda key: "x")
        assert isinstance(translator, CallableTranslator)
        assert translator.lookup("anything") == "x"

    def test_translator_passes_through(self):
        translator = NullTranslator()
        assert as_translator(translator) is translator

    def test_non_callable_rejected(self):
        with pytest.raises(TypeError):
            as_translator("zh-CN")

    def test_callable_result_coerced_to_str(self):
        assert CallableTranslator(lambda key: 42).lookup("k") == "42"

    @pytest.mark.parametrize("answer", [None, ""])
    def test_absent_answer_uses_default(self, answer):
        translator = CallableTranslator(lambda key: answer)
        assert translate_or_default(translator, "invoice.total", "TOTAL") == "TOTAL"
