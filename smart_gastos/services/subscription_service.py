"""
Serviço de Assinaturas - CRUD, alternância de status e análises
"""
import logging

from smart_gastos.models import SubscriptionStatus
from smart_gastos.services import aggregation
from smart_gastos.services.validation import (
    missing_fields,
    require_date,
    require_positive_amount,
    require_text,
)

logger = logging.getLogger(__name__)

CAMPOS_OBRIGATORIOS = ('name', 'category', 'amount', 'nextPayment')


def _validar_status(status):
    if status not in SubscriptionStatus.ALL:
        raise ValueError(f'Status deve ser: {", ".join(SubscriptionStatus.ALL)}')
    return status


class SubscriptionService:
    """
    Serviço para gerenciamento de assinaturas
    """

    def __init__(self, store):
        self.store = store

    def create(self, dados):
        """
        Cria uma assinatura

        Args:
            dados (dict):
                - name (str)
                - category (str)
                - amount (float): valor mensal, maior que zero
                - nextPayment (str): YYYY-MM-DD
                - status (str, opcional): Active (padrão), Pending ou Cancelled

        Raises:
            ValueError: Se dados inválidos
        """
        if missing_fields(dados, CAMPOS_OBRIGATORIOS):
            raise ValueError(
                'Todos os campos são obrigatórios: name, category, amount, nextPayment'
            )

        status = dados.get('status') or SubscriptionStatus.ACTIVE
        subscription = self.store.add_subscription({
            'name': require_text(dados['name'], 'name'),
            'category': require_text(dados['category'], 'category'),
            'amount': require_positive_amount(dados['amount']),
            'next_payment': require_date(dados['nextPayment'], 'nextPayment'),
            'status': _validar_status(status)
        })
        logger.info('Assinatura %s criada (%s)', subscription.name, subscription.id)
        return subscription

    def update(self, subscription_id, dados):
        """
        Atualização parcial

        Returns:
            Subscription ou None se não encontrada

        Raises:
            ValueError: Se algum campo informado for inválido
        """
        updates = {}
        if dados.get('name') is not None:
            updates['name'] = require_text(dados['name'], 'name')
        if dados.get('category') is not None:
            updates['category'] = require_text(dados['category'], 'category')
        if dados.get('amount') is not None:
            updates['amount'] = require_positive_amount(dados['amount'])
        if dados.get('nextPayment') is not None:
            updates['next_payment'] = require_date(dados['nextPayment'], 'nextPayment')
        if dados.get('status'):
            updates['status'] = _validar_status(dados['status'])

        return self.store.update_subscription(subscription_id, updates)

    def toggle_status(self, subscription_id):
        subscription = self.store.toggle_subscription_status(subscription_id)
        if subscription is not None:
            logger.info('Assinatura %s agora está %s', subscription.id, subscription.status)
        return subscription

    def delete(self, subscription_id):
        return self.store.delete_subscription(subscription_id)

    def analytics(self):
        """
        Análise das assinaturas ativas

        Returns:
            dict: totalMonthly, activeCount, averageCost, categoryBreakdown, annualProjection
        """
        ativas = self.store.get_active_subscriptions()
        total_mensal = aggregation.total_amount(ativas)

        return {
            'totalMonthly': total_mensal,
            'activeCount': len(ativas),
            'averageCost': aggregation.average_amount(ativas),
            'categoryBreakdown': aggregation.category_breakdown(ativas),
            'annualProjection': total_mensal * 12
        }
