"""
Armazenamento em memória - despesas, orçamentos e assinaturas

Nada é persistido: reiniciar o processo apaga tudo. Uma instância é criada
pela aplicação (create_app) e fica disponível em `current_app.data_store`.

As operações nunca lançam exceção: "não encontrado" é devolvido como
None/False e cabe a quem chama verificar.
"""
import logging
import uuid

from smart_gastos.models import Budget, Expense, Subscription, SubscriptionStatus
from smart_gastos.services import aggregation

logger = logging.getLogger(__name__)


def _novo_id():
    return str(uuid.uuid4())


def _aplicar_atualizacoes(registro, updates, campos):
    for campo in campos:
        valor = updates.get(campo)
        if valor is not None:
            setattr(registro, campo, valor)


class DataStore:
    """
    Três coleções independentes com CRUD determinístico
    """

    CAMPOS_EXPENSE = ('amount', 'description', 'category', 'date')
    CAMPOS_SUBSCRIPTION = ('name', 'category', 'amount', 'next_payment', 'status')

    def __init__(self):
        self.expenses = []
        self.budgets = []
        self.subscriptions = []

    def clear(self):
        self.expenses.clear()
        self.budgets.clear()
        self.subscriptions.clear()

    # ========================================================================
    # DESPESAS
    # ========================================================================

    def add_expense(self, dados):
        """
        Adiciona uma despesa

        Args:
            dados (dict): amount, description, category, date (já validados)

        Returns:
            Expense: registro armazenado com id novo
        """
        expense = Expense(
            id=_novo_id(),
            amount=dados['amount'],
            description=dados['description'],
            category=dados['category'],
            date=dados['date']
        )
        self.expenses.append(expense)
        logger.debug('Despesa adicionada: %s', expense.id)
        return expense

    def get_all_expenses(self):
        return list(self.expenses)

    def get_expense_by_id(self, expense_id):
        return next((e for e in self.expenses if e.id == expense_id), None)

    def get_expenses_by_month(self, month):
        """Despesas cujo prefixo da data (YYYY-MM) é igual ao mês"""
        return [e for e in self.expenses if e.date[:7] == month]

    def update_expense(self, expense_id, updates):
        expense = self.get_expense_by_id(expense_id)
        if expense is None:
            return None
        _aplicar_atualizacoes(expense, updates, self.CAMPOS_EXPENSE)
        return expense

    def delete_expense(self, expense_id):
        for index, expense in enumerate(self.expenses):
            if expense.id == expense_id:
                del self.expenses[index]
                return True
        return False

    def get_recent_expenses(self, month):
        """Despesas do mês + assinaturas ativas, mais recentes primeiro"""
        todas = self.get_expenses_by_month(month) + self.get_subscription_expenses(month)
        return aggregation.sort_by_date_desc(todas)

    # ========================================================================
    # ORÇAMENTOS
    # ========================================================================

    def set_budget(self, month, total_budget):
        """
        Define o orçamento do mês (upsert pela chave do mês)

        Returns:
            Budget: registro existente atualizado ou novo registro
        """
        budget = self.get_budget_by_month(month)
        if budget is not None:
            budget.total_budget = total_budget
            return budget

        budget = Budget(id=_novo_id(), month=month, total_budget=total_budget)
        self.budgets.append(budget)
        return budget

    def get_budget_by_month(self, month):
        return next((b for b in self.budgets if b.month == month), None)

    def get_all_budgets(self):
        return list(self.budgets)

    # ========================================================================
    # ASSINATURAS
    # ========================================================================

    def add_subscription(self, dados):
        subscription = Subscription(
            id=_novo_id(),
            name=dados['name'],
            category=dados['category'],
            amount=dados['amount'],
            next_payment=dados['next_payment'],
            status=dados.get('status') or SubscriptionStatus.ACTIVE
        )
        self.subscriptions.append(subscription)
        return subscription

    def get_all_subscriptions(self):
        return list(self.subscriptions)

    def get_subscription_by_id(self, subscription_id):
        return next((s for s in self.subscriptions if s.id == subscription_id), None)

    def update_subscription(self, subscription_id, updates):
        """Atualização parcial; campos ausentes ou None são mantidos"""
        subscription = self.get_subscription_by_id(subscription_id)
        if subscription is None:
            return None
        _aplicar_atualizacoes(subscription, updates, self.CAMPOS_SUBSCRIPTION)
        return subscription

    def delete_subscription(self, subscription_id):
        for index, subscription in enumerate(self.subscriptions):
            if subscription.id == subscription_id:
                del self.subscriptions[index]
                return True
        return False

    def toggle_subscription_status(self, subscription_id):
        """Ativa -> Cancelada; qualquer outro status -> Ativa"""
        subscription = self.get_subscription_by_id(subscription_id)
        if subscription is None:
            return None
        if subscription.status == SubscriptionStatus.ACTIVE:
            subscription.status = SubscriptionStatus.CANCELLED
        else:
            subscription.status = SubscriptionStatus.ACTIVE
        return subscription

    def get_active_subscriptions(self):
        return [s for s in self.subscriptions if s.status == SubscriptionStatus.ACTIVE]

    def get_subscription_expenses(self, month):
        """
        Assinaturas ativas como despesas virtuais

        O mês é aceito por compatibilidade mas não reposiciona as datas:
        cada despesa virtual mantém a data do próximo pagamento.
        """
        return aggregation.materialize_subscriptions(self.get_active_subscriptions())

    def get_total_subscription_cost(self):
        return aggregation.total_amount(self.get_active_subscriptions())

    # ========================================================================
    # RESUMOS
    # ========================================================================

    def get_category_summary(self, month):
        todas = self.get_expenses_by_month(month) + self.get_subscription_expenses(month)
        return aggregation.summarize_categories(todas)
