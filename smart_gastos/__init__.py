"""Smart Gastos - API de controle de gastos pessoais"""

__version__ = '1.0.0'
