"""
Testes de filtros e paginação.
"""

import pytest

from smart_gastos.models import Expense
from smart_gastos.services.filters import (
    ExpenseFilters,
    apply_filters,
    filter_by_category,
    paginate,
    parse_pagination,
)


def despesa(amount, category, date, description='x'):
    return Expense(id=description, amount=amount, description=description, category=category, date=date)


@pytest.fixture
def registros():
    return [
        despesa(10, 'Alimentação', '2025-09-30', 'Padaria'),
        despesa(20, 'Alimentação', '2025-10-01', 'Supermercado'),
        despesa(30, 'Transporte', '2025-10-15', 'Uber'),
        despesa(40, 'Entretenimento', '2025-10-31', 'Subscription Netflix'),
        despesa(50, 'Casa', '2025-11-01', 'Aluguel'),
    ]


class TestFilters:

    def test_no_filters_returns_everything(self, registros):
        assert apply_filters(registros, ExpenseFilters()) == registros

    def test_date_range_is_inclusive(self, registros):
        filtros = ExpenseFilters(start_date='2025-10-01', end_date='2025-10-31')
        assert [r.amount for r in apply_filters(registros, filtros)] == [20, 30, 40]

    def test_category_substring_ignores_case(self, registros):
        assert [r.amount for r in filter_by_category(registros, 'aliment')] == [10, 20]

    def test_category_all_keeps_everything(self, registros):
        assert filter_by_category(registros, 'all') == registros

    def test_exact_category(self, registros):
        assert filter_by_category(registros, 'aliment', exact=True) == []
        assert len(filter_by_category(registros, 'Alimentação', exact=True)) == 2

    def test_search_matches_description(self, registros):
        filtros = ExpenseFilters(search='NETFLIX')
        assert [r.amount for r in apply_filters(registros, filtros)] == [40]

    def test_filters_combine_with_and(self, registros):
        filtros = ExpenseFilters(start_date='2025-10-01', category='Alimentação', search='super')
        assert [r.amount for r in apply_filters(registros, filtros)] == [20]

    def test_from_args_ignores_empty_values(self):
        filtros = ExpenseFilters.from_args({'startDate': '', 'category': 'Casa'})
        assert filtros.start_date is None
        assert filtros.category == 'Casa'
        assert filtros.exact_category is False


class TestPagination:

    def test_third_page_of_120(self):
        pagina = paginate(list(range(120)), 3, 50)

        assert pagina['items'] == list(range(100, 120))
        assert pagina['pagination'] == {'page': 3, 'limit': 50, 'total': 120, 'totalPages': 3}

    def test_page_past_the_end_is_empty(self):
        pagina = paginate(list(range(5)), 4, 2)
        assert pagina['items'] == []
        assert pagina['pagination']['totalPages'] == 3

    def test_empty_list(self):
        assert paginate([], 1, 50)['pagination']['totalPages'] == 0

    def test_defaults(self):
        assert parse_pagination() == (1, 50)
        assert parse_pagination('2', '10') == (2, 10)

    @pytest.mark.parametrize('page, limit', [('0', None), (None, '-5'), ('abc', None), (None, '1.5')])
    def test_invalid_values(self, page, limit):
        with pytest.raises(ValueError):
            parse_pagination(page, limit)
