"""
Serviço de Alertas - avisos derivados do estado atual

Regras:
- Orçamento: uso >= 80% gera aviso; >= 100% gera erro
- Categoria: categoria acima de 30% do orçamento gera aviso
- Gasto alto: despesa única acima de 20% do orçamento gera informação
- Assinaturas: pendente gera aviso; pagamento nos próximos 3 dias gera
  aviso; pagamento vencido há até 5 dias gera erro
- Tendência: último mês acima de 120% do mês anterior gera aviso

Nada é armazenado: os alertas são recalculados a cada consulta.
"""
from datetime import date

from dateutil.relativedelta import relativedelta

from smart_gastos.models import SubscriptionStatus
from smart_gastos.services import aggregation
from smart_gastos.services.formatters import format_currency

LIMITE_ALERTA_ORCAMENTO = 80
LIMITE_CATEGORIA = 30
LIMITE_GASTO_UNICO = 20
DIAS_AVISO_PAGAMENTO = 3
DIAS_TOLERANCIA_ATRASO = 5
FATOR_AUMENTO_TENDENCIA = 1.2


def _alerta(tipo, titulo, mensagem, hoje):
    return {
        'type': tipo,
        'title': titulo,
        'message': mensagem,
        'date': hoje.isoformat()
    }


def _plural_dias(dias):
    return f'{dias} dia{"s" if dias != 1 else ""}'


def budget_alerts(total_budget, spent, hoje):
    if not total_budget or total_budget <= 0:
        return []

    uso = (spent / total_budget) * 100
    if uso >= 100:
        excedente = spent - total_budget
        return [_alerta(
            'error',
            'Orçamento ultrapassado',
            f'Você ultrapassou seu orçamento em {format_currency(excedente)}! '
            f'Total gasto: {format_currency(spent)}',
            hoje
        )]
    if uso >= LIMITE_ALERTA_ORCAMENTO:
        return [_alerta(
            'warning',
            'Orçamento em alerta',
            f'Você já gastou {uso:.1f}% do seu orçamento mensal '
            f'({format_currency(spent)} de {format_currency(total_budget)})',
            hoje
        )]
    return []


def category_alerts(resumos, total_budget, hoje):
    if not total_budget or total_budget <= 0:
        return []

    alertas = []
    for resumo in resumos:
        participacao = (resumo.total_spent / total_budget) * 100
        if participacao > LIMITE_CATEGORIA:
            alertas.append(_alerta(
                'warning',
                'Gasto alto por categoria',
                f'Categoria "{resumo.category}" representa {participacao:.1f}% '
                f'do orçamento ({format_currency(resumo.total_spent)})',
                hoje
            ))
    return alertas


def high_expense_alerts(despesas, total_budget, hoje):
    if not total_budget or total_budget <= 0:
        return []

    alertas = []
    for despesa in despesas:
        participacao = (despesa.amount / total_budget) * 100
        if participacao > LIMITE_GASTO_UNICO:
            alertas.append(_alerta(
                'info',
                'Gasto alto detectado',
                f'Gasto "{despesa.description}" de {format_currency(despesa.amount)} '
                f'representa {participacao:.1f}% do orçamento',
                hoje
            ))
    return alertas


def next_payment_date(pagamento, hoje):
    """
    Próxima cobrança de uma assinatura mensal

    Pagamentos de meses anteriores, ou já passados no mês atual, vão para
    o mesmo dia do mês seguinte ao atual (limitado ao fim do mês).
    """
    if (pagamento.year, pagamento.month) < (hoje.year, hoje.month) or (
        (pagamento.year, pagamento.month) == (hoje.year, hoje.month)
        and pagamento.day < hoje.day
    ):
        return hoje.replace(day=1) + relativedelta(months=1, day=pagamento.day)
    return pagamento


def subscription_alerts(subscriptions, hoje):
    alertas = []
    for sub in subscriptions:
        valor = format_currency(sub.amount)

        if sub.status == SubscriptionStatus.PENDING:
            alertas.append(_alerta(
                'warning',
                'Assinatura pendente',
                f'{sub.name} tem pagamento pendente - {valor}',
                hoje
            ))
            continue

        if sub.status != SubscriptionStatus.ACTIVE:
            continue

        try:
            pagamento = date.fromisoformat(sub.next_payment)
        except ValueError:
            continue

        atraso = (hoje - pagamento).days
        if 1 <= atraso <= DIAS_TOLERANCIA_ATRASO:
            alertas.append(_alerta(
                'error',
                'Pagamento em atraso',
                f'{sub.name} está {_plural_dias(atraso)} em atraso - {valor}',
                hoje
            ))
            continue

        dias = (next_payment_date(pagamento, hoje) - hoje).days
        if 0 <= dias <= DIAS_AVISO_PAGAMENTO:
            alertas.append(_alerta(
                'warning',
                'Pagamento próximo',
                f'{sub.name} vence em {_plural_dias(dias)} - {valor}',
                hoje
            ))
    return alertas


def trend_alerts(serie, hoje):
    if len(serie) < 2:
        return []

    anterior = serie[-2]['totalAmount']
    ultimo = serie[-1]['totalAmount']
    if anterior > 0 and ultimo > anterior * FATOR_AUMENTO_TENDENCIA:
        aumento = aggregation.percent_change(anterior, ultimo)
        return [_alerta(
            'warning',
            'Relatório: Tendência de aumento',
            f'Seus gastos aumentaram {aumento:.1f}% em relação ao período anterior',
            hoje
        )]
    return []


class AlertService:
    """
    Consolida todos os alertas de um mês
    """

    def __init__(self, store):
        self.store = store

    def alerts_for_month(self, month, hoje=None):
        """
        Returns:
            list[dict]: alertas com id sequencial (1..n)
        """
        hoje = hoje or date.today()
        budget = self.store.get_budget_by_month(month)
        total_budget = budget.total_budget if budget else 0

        do_mes = (
            self.store.get_expenses_by_month(month)
            + self.store.get_subscription_expenses(month)
        )
        serie = aggregation.build_trends(
            aggregation.combine_expenses(
                self.store.get_all_expenses(),
                self.store.get_active_subscriptions()
            ),
            months=2
        )

        alertas = (
            budget_alerts(total_budget, aggregation.total_amount(do_mes), hoje)
            + category_alerts(aggregation.summarize_categories(do_mes), total_budget, hoje)
            + high_expense_alerts(do_mes, total_budget, hoje)
            + subscription_alerts(self.store.get_all_subscriptions(), hoje)
            + trend_alerts(serie, hoje)
        )

        for posicao, alerta in enumerate(alertas, start=1):
            alerta['id'] = posicao
        return alertas
