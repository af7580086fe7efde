"""
Dados de exemplo para desenvolvimento

Cenário de outubro/2025: orçamento de R$ 3.000,00, 7 despesas e
6 assinaturas ativas. Totais esperados no mês:
- Despesas: R$ 665,90
- Assinaturas: R$ 244,40
- Total geral: R$ 910,30
"""
import logging

from smart_gastos.models import SubscriptionStatus

logger = logging.getLogger(__name__)

MES_EXEMPLO = '2025-10'
DATA_EXEMPLO = '2025-10-24'
ORCAMENTO_EXEMPLO = 3000.0

DESPESAS_EXEMPLO = [
    {'amount': 150.50, 'description': 'Supermercado - compras da semana', 'category': 'Alimentação'},
    {'amount': 45.00, 'description': 'Gasolina', 'category': 'Transporte'},
    {'amount': 89.90, 'description': 'Conta de luz', 'category': 'Casa'},
    {'amount': 25.00, 'description': 'Lanche no trabalho', 'category': 'Alimentação'},
    {'amount': 120.00, 'description': 'Consulta médica', 'category': 'Saúde'},
    {'amount': 200.00, 'description': 'Roupas', 'category': 'Vestuário'},
    {'amount': 35.50, 'description': 'Cinema', 'category': 'Entretenimento'},
]

ASSINATURAS_EXEMPLO = [
    {'name': 'Netflix', 'category': 'Entretenimento', 'amount': 29.90, 'next_payment': '2025-10-06'},
    {'name': 'Spotify', 'category': 'Entretenimento', 'amount': 19.90, 'next_payment': '2025-10-09'},
    {'name': 'Adobe Creative Suite', 'category': 'Educação', 'amount': 89.90, 'next_payment': '2025-10-12'},
    {'name': 'Amazon Prime', 'category': 'Entretenimento', 'amount': 14.90, 'next_payment': '2025-10-15'},
    {'name': 'Gym Membership', 'category': 'Saúde', 'amount': 79.90, 'next_payment': '2025-10-18'},
    {'name': 'iCloud Storage', 'category': 'Outros', 'amount': 9.90, 'next_payment': '2025-10-21'},
]


def populate_sample_data(store):
    """Popula o store com o cenário de exemplo, descartando o conteúdo anterior"""
    store.clear()
    store.set_budget(MES_EXEMPLO, ORCAMENTO_EXEMPLO)

    for despesa in DESPESAS_EXEMPLO:
        store.add_expense({**despesa, 'date': DATA_EXEMPLO})

    for assinatura in ASSINATURAS_EXEMPLO:
        store.add_subscription({**assinatura, 'status': SubscriptionStatus.ACTIVE})

    logger.info(
        'Dados de exemplo carregados para %s: %d despesas, %d assinaturas',
        MES_EXEMPLO, len(DESPESAS_EXEMPLO), len(ASSINATURAS_EXEMPLO)
    )
