"""
Testes dos adaptadores de apresentação.
"""

from datetime import date

import pytest

from smart_gastos.models import CategorySummary, Expense
from smart_gastos.services.formatters import (
    BASE_ID_ASSINATURA,
    COR_PADRAO,
    category_chart,
    color_for_category,
    current_month,
    expense_for_display,
    format_currency,
    format_percentage,
    hash32,
    numeric_id,
    parse_currency,
)


class TestCurrency:

    @pytest.mark.parametrize('valor, texto', [
        (0, 'R$ 0,00'),
        (1234.56, 'R$ 1.234,56'),
        (1000000, 'R$ 1.000.000,00'),
        (-45.5, '-R$ 45,50'),
    ])
    def test_format(self, valor, texto):
        assert format_currency(valor) == texto

    @pytest.mark.parametrize('texto, valor', [
        ('R$ 1.234,56', 1234.56),
        ('150', 1.5),
        ('', 0),
        (None, 0),
        ('abc', 0),
    ])
    def test_parse_reads_digits_as_cents(self, texto, valor):
        assert parse_currency(texto) == valor

    def test_percentage(self):
        assert format_percentage(85.714) == '85.7%'


class TestColors:

    def test_known_category(self):
        assert color_for_category('Alimentação') == '#FF6B6B'

    def test_unknown_category_uses_default(self):
        assert color_for_category('Pets') == COR_PADRAO

    def test_chart_entries(self):
        chart = category_chart([CategorySummary('Casa', 1500.0, 60.0, 2)])

        assert chart == [{
            'name': 'Casa',
            'value': 1500.0,
            'color': '#45B7D1',
            'percentage': '60.0%',
            'formattedValue': 'R$ 1.500,00'
        }]


class TestNumericId:

    def test_hash_matches_java_string_hash(self):
        assert hash32('') == 0
        assert hash32('a') == 97
        assert hash32('ab') == 97 * 31 + 98

    def test_hash_wraps_to_signed_32_bits(self):
        h = hash32('Subscription Adobe Creative Suite' * 10)
        assert -2 ** 31 <= h < 2 ** 31

    def test_numeric_ids_are_kept(self):
        assert numeric_id(Expense('42', 1, 'x', 'Casa', '2025-10-01')) == 42

    def test_subscription_ids_use_reserved_range(self):
        expense = Expense('sub-abc', 1, 'Subscription X', 'Casa', '2025-10-01')
        assert numeric_id(expense) == BASE_ID_ASSINATURA + abs(hash32('sub-abc'))

    def test_uuid_ids_derive_from_content(self):
        a = Expense('uuid-1', 1, 'Pão', 'Alimentação', '2025-10-01')
        b = Expense('uuid-2', 9, 'Pão', 'Alimentação', '2025-10-01')
        assert numeric_id(a) == numeric_id(b) >= 0

    def test_display_payload(self):
        dados = expense_for_display(Expense('7', 1234.5, 'Mercado', 'Alimentação', '2025-10-01'))

        assert dados['numericId'] == 7
        assert dados['formattedAmount'] == 'R$ 1.234,50'
        assert dados['description'] == 'Mercado'


def test_current_month():
    assert current_month(date(2025, 3, 9)) == '2025-03'
