"""
Serviço de Relatórios - visão geral, comparação entre períodos,
tendências mensais e relatório por categoria
"""
from smart_gastos.services import aggregation
from smart_gastos.services.filters import (
    ExpenseFilters,
    apply_filters,
    filter_by_date_range,
)
from smart_gastos.services.validation import require_date

TOP_CATEGORIAS = 5
DESPESAS_RECENTES = 10
DESPESAS_POR_CATEGORIA = 50
MESES_TENDENCIA_PADRAO = 6


class ReportService:
    """
    Relatórios sobre despesas lançadas + todas as assinaturas
    """

    def __init__(self, store):
        self.store = store

    def all_expenses(self):
        return aggregation.combine_expenses(
            self.store.get_all_expenses(),
            self.store.get_all_subscriptions(),
            active_only=False
        )

    def reports_data(self, start_date=None, end_date=None):
        """
        Visão geral: resumo, categorias, série mensal, top 5 e recentes
        """
        despesas = filter_by_date_range(self.all_expenses(), start_date, end_date)
        total = aggregation.total_amount(despesas)

        categorias = [
            {
                'category': resumo.category,
                'amount': resumo.total_spent,
                'count': resumo.expense_count,
                'percentage': resumo.percentage
            }
            for resumo in aggregation.summarize_categories(despesas)
        ]

        return {
            'summary': {
                'totalExpenses': len(despesas),
                'totalAmount': total,
                'averageAmount': aggregation.average_amount(despesas)
            },
            'categorySummary': categorias,
            'monthlyStats': aggregation.monthly_stats(despesas),
            'topCategories': categorias[:TOP_CATEGORIAS],
            'recentExpenses': [
                e.to_dict()
                for e in aggregation.sort_by_date_desc(despesas)[:DESPESAS_RECENTES]
            ]
        }

    def period_comparison(self, period1_start, period1_end, period2_start, period2_end):
        """
        Compara dois intervalos (o período 1 é a base da variação)

        Raises:
            ValueError: algum limite ausente ou fora do formato YYYY-MM-DD
        """
        limites = (period1_start, period1_end, period2_start, period2_end)
        if not all(limites):
            raise ValueError('Parâmetros de período obrigatórios')
        for limite in limites:
            require_date(limite, 'period')

        return aggregation.compare_periods(
            self.all_expenses(),
            (period1_start, period1_end),
            (period2_start, period2_end)
        )

    def trends(self, months=MESES_TENDENCIA_PADRAO):
        """
        Tendência dos últimos meses

        Returns:
            dict: trends, trendDirection, averageMonthlySpending, monthsAnalyzed
        """
        serie = aggregation.build_trends(self.all_expenses(), months)
        media = sum(t['totalAmount'] for t in serie) / len(serie) if serie else 0

        return {
            'trends': serie,
            'trendDirection': aggregation.classify_trend(serie),
            'averageMonthlySpending': media,
            'monthsAnalyzed': months
        }

    def category_report(self, category, start_date=None, end_date=None):
        """
        Relatório detalhado de uma categoria (comparação exata do nome)

        Raises:
            ValueError: categoria não informada
        """
        if not category:
            raise ValueError('Categoria é obrigatória')

        filtros = ExpenseFilters(
            start_date=start_date,
            end_date=end_date,
            category=category,
            exact_category=True
        )
        despesas = apply_filters(self.all_expenses(), filtros)

        return {
            'category': category,
            'summary': {
                'totalAmount': aggregation.total_amount(despesas),
                'totalCount': len(despesas),
                'averageAmount': aggregation.average_amount(despesas),
                'startDate': start_date or 'N/A',
                'endDate': end_date or 'N/A'
            },
            'monthlyStats': aggregation.monthly_stats(despesas),
            'expenses': [
                e.to_dict()
                for e in aggregation.sort_by_date_desc(despesas)[:DESPESAS_POR_CATEGORIA]
            ]
        }
