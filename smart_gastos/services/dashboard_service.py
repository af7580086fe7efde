"""
Serviço do Dashboard - despesas, orçamento e resumo do mês

Este serviço implementa:
1. Validação e cadastro de despesas
2. Definição de orçamento mensal
3. Dados consolidados do dashboard (despesas + assinaturas ativas)
"""
import logging

from smart_gastos.services import aggregation
from smart_gastos.services.validation import (
    is_positive_number,
    missing_fields,
    require_date,
    require_month,
    require_positive_amount,
    require_text,
)

logger = logging.getLogger(__name__)

CAMPOS_OBRIGATORIOS_DESPESA = ('amount', 'description', 'category', 'date')


class DashboardService:
    """
    Operações do dashboard sobre um DataStore
    """

    def __init__(self, store):
        self.store = store

    # ========================================================================
    # DESPESAS
    # ========================================================================

    def add_expense(self, dados):
        """
        Valida e adiciona uma despesa

        Args:
            dados (dict): amount, description, category, date (YYYY-MM-DD)

        Returns:
            Expense: registro criado

        Raises:
            ValueError: campos ausentes ou inválidos
        """
        if missing_fields(dados, CAMPOS_OBRIGATORIOS_DESPESA):
            raise ValueError(
                'Todos os campos são obrigatórios: amount, description, category, date'
            )

        expense = self.store.add_expense({
            'amount': require_positive_amount(dados['amount']),
            'description': require_text(dados['description'], 'description'),
            'category': require_text(dados['category'], 'category'),
            'date': require_date(dados['date'])
        })
        logger.info('Despesa %s adicionada em %s', expense.id, expense.date)
        return expense

    def update_expense(self, expense_id, dados):
        """
        Atualiza campos informados de uma despesa

        Returns:
            Expense ou None se não encontrada
        """
        updates = {}
        if dados.get('amount') is not None:
            updates['amount'] = require_positive_amount(dados['amount'])
        if dados.get('description') is not None:
            updates['description'] = require_text(dados['description'], 'description')
        if dados.get('category') is not None:
            updates['category'] = require_text(dados['category'], 'category')
        if dados.get('date') is not None:
            updates['date'] = require_date(dados['date'])

        return self.store.update_expense(expense_id, updates)

    def delete_expense(self, expense_id):
        removida = self.store.delete_expense(expense_id)
        if removida:
            logger.info('Despesa %s removida', expense_id)
        return removida

    def month_expenses(self, month):
        return self.store.get_expenses_by_month(require_month(month))

    # ========================================================================
    # ORÇAMENTO
    # ========================================================================

    def set_budget(self, dados):
        """
        Define ou atualiza o orçamento do mês

        Raises:
            ValueError: mês ausente ou orçamento não positivo
        """
        month = dados.get('month')
        total_budget = dados.get('totalBudget')

        if not month or not is_positive_number(total_budget):
            raise ValueError(
                'Mês e orçamento total são obrigatórios. Orçamento deve ser maior que zero.'
            )

        budget = self.store.set_budget(require_month(month), float(total_budget))
        logger.info('Orçamento de %s definido em %.2f', budget.month, budget.total_budget)
        return budget

    def get_budget(self, month):
        return self.store.get_budget_by_month(require_month(month))

    # ========================================================================
    # RESUMO DO MÊS
    # ========================================================================

    def combined_month_expenses(self, month):
        """Despesas do mês seguidas das assinaturas ativas"""
        month = require_month(month)
        return (
            self.store.get_expenses_by_month(month)
            + self.store.get_subscription_expenses(month)
        )

    def category_summary(self, month):
        return self.store.get_category_summary(require_month(month))

    def recent_expenses(self, month):
        return self.store.get_recent_expenses(require_month(month))

    def dashboard_data(self, month):
        """
        Dados completos do dashboard

        Returns:
            dict: budget, totalSpent, remaining, expenses, categoryChart, recentExpenses
        """
        month = require_month(month)
        budget = self.store.get_budget_by_month(month)
        todas = self.combined_month_expenses(month)

        total_spent = aggregation.total_amount(todas)
        remaining = budget.total_budget - total_spent if budget else 0

        return {
            'budget': budget.to_dict() if budget else None,
            'totalSpent': total_spent,
            'remaining': remaining,
            'expenses': [e.to_dict() for e in todas],
            'categoryChart': [c.to_dict() for c in self.store.get_category_summary(month)],
            'recentExpenses': [e.to_dict() for e in aggregation.sort_by_date_desc(todas)]
        }
