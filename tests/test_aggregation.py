"""
Testes das funções de agregação.
"""

import pytest

from smart_gastos.models import Expense, Subscription, SubscriptionStatus
from smart_gastos.services import aggregation


def despesa(amount, category, date, description='x', id_='1'):
    return Expense(id=id_, amount=amount, description=description, category=category, date=date)


class TestMaterialization:

    def test_only_active_by_default(self):
        subs = [
            Subscription('a', 'Netflix', 'Entretenimento', 30, '2025-10-06'),
            Subscription('b', 'Adobe', 'Educação', 90, '2025-10-12', SubscriptionStatus.CANCELLED),
        ]

        virtuais = aggregation.materialize_subscriptions(subs)

        assert [v.id for v in virtuais] == ['sub-a']
        assert virtuais[0].is_virtual

    def test_all_statuses_when_requested(self):
        subs = [
            Subscription('a', 'Netflix', 'Entretenimento', 30, '2025-10-06'),
            Subscription('b', 'Adobe', 'Educação', 90, '2025-10-12', SubscriptionStatus.PENDING),
        ]
        assert len(aggregation.materialize_subscriptions(subs, active_only=False)) == 2

    def test_combine_keeps_real_expenses_first(self):
        real = [despesa(10, 'Casa', '2025-10-01')]
        subs = [Subscription('a', 'Netflix', 'Entretenimento', 30, '2025-09-06')]

        combinadas = aggregation.combine_expenses(real, subs)

        assert [c.id for c in combinadas] == ['1', 'sub-a']


class TestCategorySummary:

    def test_ties_keep_first_seen_order(self):
        registros = [
            despesa(10, 'B', '2025-10-01'),
            despesa(10, 'A', '2025-10-01'),
            despesa(30, 'C', '2025-10-01'),
        ]

        resumo = aggregation.summarize_categories(registros)

        assert [r.category for r in resumo] == ['C', 'B', 'A']

    def test_zero_total_gives_zero_percentage(self):
        resumo = aggregation.summarize_categories([despesa(0, 'A', '2025-10-01')])
        assert resumo[0].percentage == 0

    def test_breakdown(self):
        registros = [despesa(10, 'A', '2025-10-01'), despesa(5, 'B', '2025-10-02'), despesa(1, 'A', '2025-10-03')]
        assert aggregation.category_breakdown(registros) == {'A': 11, 'B': 5}


class TestPeriodKey:

    @pytest.mark.parametrize('data, esperado', [
        ('2025-10-19', '2025-10-19'),  # domingo
        ('2025-10-20', '2025-10-19'),  # segunda
        ('2025-10-25', '2025-10-19'),  # sábado
        ('2025-11-01', '2025-10-26'),  # sábado, semana começa no mês anterior
    ])
    def test_week_starts_on_sunday(self, data, esperado):
        assert aggregation.period_key(data, 'week') == esperado

    def test_other_granularities(self):
        assert aggregation.period_key('2025-10-24', 'day') == '2025-10-24'
        assert aggregation.period_key('2025-10-24', 'month') == '2025-10'
        assert aggregation.period_key('2025-10-24', 'year') == '2025'

    def test_unknown_period(self):
        with pytest.raises(ValueError):
            aggregation.period_key('2025-10-24', 'quarter')


class TestGroupByPeriod:

    def test_sums_and_sorts_ascending(self):
        registros = [
            despesa(10, 'A', '2025-11-02'),
            despesa(5, 'A', '2025-10-01'),
            despesa(7, 'B', '2025-11-20'),
        ]

        assert aggregation.group_by_period(registros, 'month') == [
            {'period': '2025-10', 'amount': 5},
            {'period': '2025-11', 'amount': 17},
        ]

    def test_week_mode_skips_unparsable_dates(self):
        registros = [despesa(10, 'A', 'sem-data'), despesa(5, 'A', '2025-10-21')]

        assert aggregation.group_by_period(registros, 'week') == [
            {'period': '2025-10-19', 'amount': 5}
        ]

    def test_monthly_stats(self):
        registros = [despesa(10, 'A', '2025-11-02'), despesa(5, 'A', '2025-11-01')]
        assert aggregation.monthly_stats(registros) == [{'month': '2025-11', 'amount': 15, 'count': 2}]


class TestComparison:

    def test_percent_change_with_zero_previous(self):
        assert aggregation.percent_change(0, 250) == 0

    def test_compare_periods(self):
        registros = [
            despesa(100, 'A', '2025-09-10'),
            despesa(150, 'A', '2025-10-10'),
            despesa(50, 'B', '2025-10-11'),
        ]

        resultado = aggregation.compare_periods(
            registros,
            ('2025-09-01', '2025-09-30'),
            ('2025-10-01', '2025-10-31'),
        )

        assert resultado['period1']['totalAmount'] == 100
        assert resultado['period2']['totalExpenses'] == 2
        assert resultado['period2']['categoryBreakdown'] == {'A': 150, 'B': 50}
        assert resultado['comparison']['totalAmountChange'] == 100
        assert resultado['comparison']['amountDifference'] == 100
        assert resultado['comparison']['expensesDifference'] == 1

    def test_empty_first_period_has_no_division_by_zero(self):
        registros = [despesa(80, 'A', '2025-10-10')]

        resultado = aggregation.compare_periods(
            registros,
            ('2025-09-01', '2025-09-30'),
            ('2025-10-01', '2025-10-31'),
        )

        assert resultado['comparison']['totalAmountChange'] == 0
        assert resultado['comparison']['totalExpensesChange'] == 0
        assert resultado['period1']['averageAmount'] == 0

    def test_overlapping_ranges_count_in_both(self):
        registros = [despesa(80, 'A', '2025-10-10')]

        resultado = aggregation.compare_periods(
            registros,
            ('2025-10-01', '2025-10-15'),
            ('2025-10-10', '2025-10-31'),
        )

        assert resultado['period1']['totalExpenses'] == 1
        assert resultado['period2']['totalExpenses'] == 1


class TestTrends:

    def test_keeps_last_n_months(self):
        registros = [
            despesa(10, 'A', '2025-07-01'),
            despesa(20, 'A', '2025-08-01'),
            despesa(30, 'B', '2025-09-01'),
        ]

        serie = aggregation.build_trends(registros, 2)

        assert [t['month'] for t in serie] == ['2025-08', '2025-09']
        assert serie[1]['categories'] == {'B': 30}
        assert serie[1]['averageAmount'] == 30

    @pytest.mark.parametrize('valores, direcao', [
        ([100, 100], 'stable'),
        ([100, 150], 'increasing'),
        ([100, 50], 'decreasing'),
        ([100, 500, 100], 'stable'),
        ([100], 'stable'),
        ([], 'stable'),
    ])
    def test_classify_compares_first_and_last(self, valores, direcao):
        serie = [{'month': f'2025-{i + 1:02d}', 'totalAmount': v} for i, v in enumerate(valores)]
        assert aggregation.classify_trend(serie) == direcao
