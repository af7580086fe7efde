"""
Agregações sobre despesas - núcleo dos relatórios

Todas as funções são puras: recebem listas de Expense (reais e virtuais)
e devolvem estruturas prontas para serialização. Nenhuma delas altera o
DataStore.

Fluxo típico: filtrar -> combinar com assinaturas -> agrupar -> resumir
"""
from datetime import date, timedelta

from smart_gastos.models import (
    CategorySummary,
    Expense,
    SUBSCRIPTION_EXPENSE_PREFIX,
)

PERIODOS_VALIDOS = ('day', 'week', 'month', 'year')


# ============================================================================
# ASSINATURAS -> DESPESAS VIRTUAIS
# ============================================================================

def subscription_to_expense(subscription):
    """
    Materializa uma assinatura como despesa virtual

    A data usada é o próximo pagamento da assinatura, sem ajuste para o
    mês consultado.
    """
    return Expense(
        id=f'{SUBSCRIPTION_EXPENSE_PREFIX}{subscription.id}',
        amount=subscription.amount,
        description=f'Subscription {subscription.name}',
        category=subscription.category,
        date=subscription.next_payment
    )


def materialize_subscriptions(subscriptions, active_only=True):
    if active_only:
        subscriptions = [s for s in subscriptions if s.is_active]
    return [subscription_to_expense(s) for s in subscriptions]


def combine_expenses(expenses, subscriptions, active_only=True):
    """Despesas reais seguidas das despesas virtuais das assinaturas"""
    return list(expenses) + materialize_subscriptions(subscriptions, active_only)


# ============================================================================
# TOTAIS E CATEGORIAS
# ============================================================================

def total_amount(records):
    return sum(r.amount for r in records)


def average_amount(records):
    if not records:
        return 0
    return total_amount(records) / len(records)


def _group_by_category(records):
    # dict preserva a ordem de primeira ocorrência
    grupos = {}
    for record in records:
        atual = grupos.setdefault(record.category, {'total': 0, 'count': 0})
        atual['total'] += record.amount
        atual['count'] += 1
    return grupos


def summarize_categories(records):
    """
    Resumo por categoria, ordenado pelo total gasto (maior primeiro)

    Empates mantêm a ordem em que a categoria apareceu pela primeira vez.

    Returns:
        list[CategorySummary]
    """
    total = total_amount(records)
    resumos = [
        CategorySummary(
            category=categoria,
            total_spent=dados['total'],
            percentage=(dados['total'] / total) * 100 if total > 0 else 0,
            expense_count=dados['count']
        )
        for categoria, dados in _group_by_category(records).items()
    ]
    resumos.sort(key=lambda r: r.total_spent, reverse=True)
    return resumos


def category_breakdown(records):
    """{categoria: valor} na ordem de primeira ocorrência"""
    return {
        categoria: dados['total']
        for categoria, dados in _group_by_category(records).items()
    }


def sort_by_date_desc(records):
    return sorted(records, key=lambda r: r.date, reverse=True)


# ============================================================================
# SÉRIES POR PERÍODO
# ============================================================================

def period_key(date_str, period):
    """
    Chave de agrupamento de uma data 'YYYY-MM-DD'

    - day: a própria data
    - week: domingo que inicia a semana (não é a semana ISO)
    - month: 'YYYY-MM'
    - year: 'YYYY'

    Raises:
        ValueError: período desconhecido ou data inválida no modo semanal
    """
    if period == 'day':
        return date_str
    if period == 'week':
        dia = date.fromisoformat(date_str)
        # weekday(): segunda=0 ... domingo=6
        inicio = dia - timedelta(days=(dia.weekday() + 1) % 7)
        return inicio.isoformat()
    if period == 'month':
        return date_str[:7]
    if period == 'year':
        return date_str[:4]
    raise ValueError(f'Período inválido. Use um dos seguintes: {", ".join(PERIODOS_VALIDOS)}')


def group_by_period(records, period):
    """
    Soma dos valores por período, em ordem cronológica

    Registros com data ilegível no modo semanal ficam de fora.

    Returns:
        list[dict]: [{'period': ..., 'amount': ...}]
    """
    if period not in PERIODOS_VALIDOS:
        raise ValueError(f'Período inválido. Use um dos seguintes: {", ".join(PERIODOS_VALIDOS)}')

    totais = {}
    for record in records:
        try:
            chave = period_key(record.date, period)
        except ValueError:
            continue
        totais[chave] = totais.get(chave, 0) + record.amount

    return [
        {'period': chave, 'amount': valor}
        for chave, valor in sorted(totais.items())
    ]


def _group_by_month(records):
    meses = {}
    for record in records:
        meses.setdefault(record.date[:7], []).append(record)
    return meses


def monthly_stats(records):
    """[{'month', 'amount', 'count'}] em ordem cronológica"""
    return [
        {
            'month': mes,
            'amount': total_amount(despesas),
            'count': len(despesas)
        }
        for mes, despesas in sorted(_group_by_month(records).items())
    ]


def period_stats(records):
    return {
        'totalExpenses': len(records),
        'totalAmount': total_amount(records),
        'averageAmount': average_amount(records),
        'categoryBreakdown': category_breakdown(records)
    }


# ============================================================================
# COMPARAÇÕES E TENDÊNCIAS
# ============================================================================

def percent_change(previous, current):
    """Variação percentual; 0 quando o valor anterior é zero"""
    if previous > 0:
        return ((current - previous) / previous) * 100
    return 0


def _in_range(record, start, end):
    return start <= record.date <= end


def compare_periods(records, period1, period2):
    """
    Compara dois intervalos de datas (inclusivos)

    O período 1 é o anterior e o período 2 o atual. Os intervalos são
    filtrados de forma independente: se se sobrepõem, uma despesa conta
    nos dois.

    Args:
        records: despesas já combinadas com assinaturas
        period1: tupla (inicio, fim) no formato 'YYYY-MM-DD'
        period2: tupla (inicio, fim)
    """
    p1_start, p1_end = period1
    p2_start, p2_end = period2

    stats1 = period_stats([r for r in records if _in_range(r, p1_start, p1_end)])
    stats2 = period_stats([r for r in records if _in_range(r, p2_start, p2_end)])

    return {
        'period1': {**stats1, 'startDate': p1_start, 'endDate': p1_end},
        'period2': {**stats2, 'startDate': p2_start, 'endDate': p2_end},
        'comparison': {
            'totalAmountChange': percent_change(stats1['totalAmount'], stats2['totalAmount']),
            'totalExpensesChange': percent_change(stats1['totalExpenses'], stats2['totalExpenses']),
            'amountDifference': stats2['totalAmount'] - stats1['totalAmount'],
            'expensesDifference': stats2['totalExpenses'] - stats1['totalExpenses']
        }
    }


def build_trends(records, months):
    """
    Série mensal dos últimos `months` meses que possuem despesas

    Returns:
        list[dict]: [{'month', 'totalAmount', 'totalCount', 'averageAmount', 'categories'}]
    """
    por_mes = _group_by_month(records)
    ultimos = sorted(por_mes)[-months:] if months > 0 else []

    return [
        {
            'month': mes,
            'totalAmount': total_amount(por_mes[mes]),
            'totalCount': len(por_mes[mes]),
            'averageAmount': average_amount(por_mes[mes]),
            'categories': category_breakdown(por_mes[mes])
        }
        for mes in ultimos
    ]


def classify_trend(trends, key='totalAmount'):
    """
    Direção da tendência comparando apenas o primeiro e o último ponto

    Returns:
        str: 'increasing', 'decreasing' ou 'stable'
    """
    if len(trends) < 2:
        return 'stable'

    primeiro = trends[0][key]
    ultimo = trends[-1][key]
    if ultimo > primeiro:
        return 'increasing'
    if ultimo < primeiro:
        return 'decreasing'
    return 'stable'
