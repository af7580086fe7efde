"""
Serviço de Histórico - listagem filtrada, estatísticas e séries por período

O histórico considera todas as assinaturas cadastradas (qualquer status)
como despesas virtuais, além das despesas lançadas.
"""
from smart_gastos.services import aggregation
from smart_gastos.services.filters import (
    apply_filters,
    filter_by_date_range,
    paginate,
)


class HistoryService:

    def __init__(self, store):
        self.store = store

    def all_expenses(self):
        return aggregation.combine_expenses(
            self.store.get_all_expenses(),
            self.store.get_all_subscriptions(),
            active_only=False
        )

    def expense_history(self, filters, page, limit):
        """
        Histórico filtrado, mais recentes primeiro, paginado

        Returns:
            dict: {'expenses': [...], 'pagination': {...}}
        """
        filtradas = aggregation.sort_by_date_desc(apply_filters(self.all_expenses(), filters))
        pagina = paginate(filtradas, page, limit)
        return {
            'expenses': [e.to_dict() for e in pagina['items']],
            'pagination': pagina['pagination']
        }

    def history_stats(self, start_date=None, end_date=None):
        despesas = filter_by_date_range(self.all_expenses(), start_date, end_date)
        total = aggregation.total_amount(despesas)

        return {
            'totalExpenses': len(despesas),
            'totalAmount': total,
            'averageAmount': aggregation.average_amount(despesas),
            'categorySummary': [
                {
                    'category': resumo.category,
                    'totalAmount': resumo.total_spent,
                    'count': resumo.expense_count,
                    'percentage': resumo.percentage
                }
                for resumo in aggregation.summarize_categories(despesas)
            ],
            'monthlyData': [
                {'month': item['month'], 'amount': item['amount']}
                for item in aggregation.monthly_stats(despesas)
            ]
        }

    def expenses_by_period(self, period='month', start_date=None, end_date=None):
        """
        Série para gráficos agrupada por dia, semana, mês ou ano

        Raises:
            ValueError: período desconhecido
        """
        despesas = filter_by_date_range(self.all_expenses(), start_date, end_date)
        return aggregation.group_by_period(despesas, period)
