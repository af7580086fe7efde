"""
Modelos de dados - Smart Gastos

Registros mantidos em memória pelo DataStore:
- Expense: despesa avulsa lançada pelo usuário
- Budget: orçamento mensal (um por mês)
- Subscription: assinatura recorrente mensal
- CategorySummary: resumo derivado por categoria (nunca armazenado)
"""
from dataclasses import dataclass


class SubscriptionStatus:
    """Status possíveis de uma assinatura"""
    ACTIVE = 'Active'
    PENDING = 'Pending'
    CANCELLED = 'Cancelled'

    ALL = (ACTIVE, PENDING, CANCELLED)


# Prefixo dos ids de despesas virtuais geradas a partir de assinaturas
SUBSCRIPTION_EXPENSE_PREFIX = 'sub-'


@dataclass
class Expense:
    """
    Despesa (ex: Supermercado, Gasolina, Conta de luz)

    A data é sempre 'YYYY-MM-DD'; o mês de referência é o prefixo 'YYYY-MM'.
    """
    id: str
    amount: float
    description: str
    category: str
    date: str

    def __repr__(self):
        return f'<Expense {self.description} ({self.amount})>'

    @property
    def month(self):
        return self.date[:7]

    @property
    def is_virtual(self):
        """Despesa derivada de uma assinatura"""
        return self.id.startswith(SUBSCRIPTION_EXPENSE_PREFIX)

    def to_dict(self):
        return {
            'id': self.id,
            'amount': self.amount,
            'description': self.description,
            'category': self.category,
            'date': self.date
        }


@dataclass
class Budget:
    """
    Orçamento total do mês (formato do mês: YYYY-MM)
    """
    id: str
    month: str
    total_budget: float

    def __repr__(self):
        return f'<Budget {self.month}: {self.total_budget}>'

    def to_dict(self):
        return {
            'id': self.id,
            'month': self.month,
            'totalBudget': self.total_budget
        }


@dataclass
class Subscription:
    """
    Assinatura mensal (ex: Netflix, Spotify, Academia)
    """
    id: str
    name: str
    category: str
    amount: float
    next_payment: str
    status: str = SubscriptionStatus.ACTIVE

    def __repr__(self):
        return f'<Subscription {self.name} ({self.status})>'

    @property
    def is_active(self):
        return self.status == SubscriptionStatus.ACTIVE

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'amount': self.amount,
            'nextPayment': self.next_payment,
            'status': self.status
        }


@dataclass
class CategorySummary:
    """Total gasto por categoria dentro de um escopo (mês, período...)"""
    category: str
    total_spent: float
    percentage: float
    expense_count: int

    def to_dict(self):
        return {
            'category': self.category,
            'totalSpent': self.total_spent,
            'percentage': self.percentage,
            'expenseCount': self.expense_count
        }
