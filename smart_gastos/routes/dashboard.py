"""
Rotas da API para Dashboard - Dados Consolidados do Mês

Endpoints:
- GET  /api/dashboard?month=YYYY-MM          - Dados completos do dashboard
- GET  /api/budget?month=YYYY-MM             - Orçamento do mês
- POST /api/budget                           - Define/atualiza orçamento do mês
- GET  /api/categories/summary?month=YYYY-MM - Resumo por categoria
- GET  /api/categories/chart?month=YYYY-MM   - Dados do gráfico de pizza (cores e valores formatados)
"""
from flask import Blueprint

from smart_gastos.routes.helpers import error, get_store, json_body, month_param, success
from smart_gastos.services.dashboard_service import DashboardService
from smart_gastos.services.formatters import category_chart

dashboard_bp = Blueprint('dashboard', __name__)


@dashboard_bp.route('/dashboard', methods=['GET'])
def obter_dashboard():
    """
    Retorna dados do mês: orçamento, total gasto, saldo restante,
    despesas (incluindo assinaturas ativas), gráfico por categoria e
    despesas recentes
    """
    try:
        dados = DashboardService(get_store()).dashboard_data(month_param())
    except ValueError as e:
        return error(str(e), 400)

    return success(dados)


@dashboard_bp.route('/budget', methods=['GET'])
def obter_orcamento():
    try:
        budget = DashboardService(get_store()).get_budget(month_param())
    except ValueError as e:
        return error(str(e), 400)

    if not budget:
        return error('Orçamento não encontrado para o mês', 404)

    return success(budget.to_dict())


@dashboard_bp.route('/budget', methods=['POST'])
def definir_orcamento():
    """
    Define ou atualiza o orçamento do mês

    Body: {"month": "YYYY-MM", "totalBudget": 3000}
    """
    try:
        budget = DashboardService(get_store()).set_budget(json_body())
    except ValueError as e:
        return error(str(e), 400)

    return success(budget.to_dict(), 'Orçamento definido com sucesso')


@dashboard_bp.route('/categories/summary', methods=['GET'])
def resumo_categorias():
    try:
        resumo = DashboardService(get_store()).category_summary(month_param())
    except ValueError as e:
        return error(str(e), 400)

    return success([c.to_dict() for c in resumo])


@dashboard_bp.route('/categories/chart', methods=['GET'])
def grafico_categorias():
    """Distribuição de despesas por categoria, pronta para o gráfico"""
    try:
        resumo = DashboardService(get_store()).category_summary(month_param())
    except ValueError as e:
        return error(str(e), 400)

    return success(category_chart(resumo))
