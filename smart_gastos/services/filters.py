"""
Filtros e paginação aplicados à lista combinada (despesas + assinaturas)

Cada filtro só é aplicado se o parâmetro correspondente foi informado.
Os filtros são independentes entre si (semântica E).
"""
from dataclasses import dataclass
from math import ceil
from typing import Optional

LIMITE_PADRAO = 50


@dataclass
class ExpenseFilters:
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    category: Optional[str] = None
    search: Optional[str] = None
    # True: categoria idêntica; False: trecho sem diferenciar maiúsculas
    exact_category: bool = False

    @classmethod
    def from_args(cls, args, exact_category=False):
        """Monta os filtros a partir da query string (request.args)"""
        return cls(
            start_date=args.get('startDate') or None,
            end_date=args.get('endDate') or None,
            category=args.get('category') or None,
            search=args.get('search') or None,
            exact_category=exact_category
        )


def filter_by_date_range(records, start_date=None, end_date=None):
    """Intervalo inclusivo por comparação de strings 'YYYY-MM-DD'"""
    if start_date:
        records = [r for r in records if r.date >= start_date]
    if end_date:
        records = [r for r in records if r.date <= end_date]
    return records


def filter_by_category(records, category, exact=False):
    if not category:
        return records
    if exact:
        return [r for r in records if r.category == category]
    if category == 'all':
        return records
    termo = category.lower()
    return [r for r in records if termo in r.category.lower()]


def filter_by_search(records, search):
    if not search:
        return records
    termo = search.lower()
    return [r for r in records if termo in r.description.lower()]


def apply_filters(records, filters):
    records = filter_by_date_range(records, filters.start_date, filters.end_date)
    records = filter_by_category(records, filters.category, filters.exact_category)
    return filter_by_search(records, filters.search)


def _parse_positivo(valor, padrao, nome):
    if valor is None or valor == '':
        return padrao
    try:
        numero = int(valor)
    except (TypeError, ValueError):
        raise ValueError(f'Parâmetro {nome} deve ser um número inteiro') from None
    if numero < 1:
        raise ValueError(f'Parâmetro {nome} deve ser maior que zero')
    return numero


def parse_pagination(page=None, limit=None):
    """
    Converte page/limit da query string

    Raises:
        ValueError: valores não inteiros ou menores que 1
    """
    return (
        _parse_positivo(page, 1, 'page'),
        _parse_positivo(limit, LIMITE_PADRAO, 'limit'),
    )


def paginate(records, page, limit):
    """
    Fatia [offset, offset + limit) com offset = (page - 1) * limit

    Returns:
        dict: {'items': [...], 'pagination': {page, limit, total, totalPages}}
    """
    offset = (page - 1) * limit
    total = len(records)
    return {
        'items': records[offset:offset + limit],
        'pagination': {
            'page': page,
            'limit': limit,
            'total': total,
            'totalPages': ceil(total / limit)
        }
    }
