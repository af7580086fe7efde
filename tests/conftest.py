"""
Fixtures compartilhadas dos testes do Smart Gastos.
"""

import pytest

from smart_gastos.app import create_app
from smart_gastos.data_store import DataStore
from smart_gastos.models import SubscriptionStatus


@pytest.fixture
def store():
    """DataStore vazio e isolado por teste."""
    return DataStore()


@pytest.fixture
def app(store):
    """Aplicação em modo de teste usando o store do teste."""
    return create_app('testing', data_store=store)


@pytest.fixture
def client(app):
    """Cliente de teste do Flask."""
    return app.test_client()


def add_expense(store, amount, category, date, description='Despesa'):
    """Atalho para lançar uma despesa direto no store."""
    return store.add_expense({
        'amount': amount,
        'description': description,
        'category': category,
        'date': date,
    })


def add_subscription(store, name, amount, next_payment, category='Entretenimento',
                     status=SubscriptionStatus.ACTIVE):
    """Atalho para cadastrar uma assinatura direto no store."""
    return store.add_subscription({
        'name': name,
        'category': category,
        'amount': amount,
        'next_payment': next_payment,
        'status': status,
    })
