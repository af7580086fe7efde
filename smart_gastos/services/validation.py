"""
Validações de entrada compartilhadas pelos serviços

Todas lançam ValueError com a mensagem devolvida ao cliente (HTTP 400).
"""
import math
import re
from datetime import datetime

from smart_gastos.services.formatters import parse_currency

_PADRAO_MES = re.compile(r'^\d{4}-\d{2}$')
_PADRAO_DATA = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')


def is_positive_number(valor):
    # bool é subclasse de int e não conta como valor
    return (
        isinstance(valor, (int, float))
        and not isinstance(valor, bool)
        and math.isfinite(valor)
        and valor > 0
    )


def require_positive_amount(valor):
    """
    Valor monetário maior que zero

    Aceita número ou o texto digitado no campo de valor ('R$ 1.234,56').
    """
    if isinstance(valor, str):
        valor = parse_currency(valor)
    if not is_positive_number(valor):
        raise ValueError('Valor deve ser um número maior que zero')
    return float(valor)


def require_date(valor, campo='date'):
    """Data no formato YYYY-MM-DD"""
    if not isinstance(valor, str) or not _PADRAO_DATA.match(valor):
        raise ValueError(f'Campo {campo} deve estar no formato YYYY-MM-DD')
    try:
        datetime.strptime(valor, '%Y-%m-%d')
    except ValueError:
        raise ValueError(f'Campo {campo} deve estar no formato YYYY-MM-DD') from None
    return valor


def require_month(valor):
    """Mês no formato YYYY-MM"""
    if not isinstance(valor, str) or not _PADRAO_MES.match(valor):
        raise ValueError('Mês deve estar no formato YYYY-MM')
    if not 1 <= int(valor[5:]) <= 12:
        raise ValueError('Mês deve estar no formato YYYY-MM')
    return valor


def require_text(valor, campo):
    if not isinstance(valor, str) or not valor.strip():
        raise ValueError(f'Campo {campo} deve ser um texto não vazio')
    return valor.strip()


def missing_fields(dados, campos):
    return [c for c in campos if dados.get(c) in (None, '')]
