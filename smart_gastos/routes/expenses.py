"""
Rotas para gerenciamento de Despesas

Endpoints:
- GET    /api/expenses?month=YYYY-MM         - Despesas lançadas no mês
- POST   /api/expenses                       - Adiciona despesa
- GET    /api/expenses/recent?month=YYYY-MM  - Despesas do mês + assinaturas, mais recentes primeiro
- GET    /api/expenses/<id>                  - Obtém uma despesa
- PUT    /api/expenses/<id>                  - Atualiza campos de uma despesa
- DELETE /api/expenses/<id>                  - Remove uma despesa
"""
from flask import Blueprint, request

from smart_gastos.routes.helpers import error, get_store, json_body, month_param, success
from smart_gastos.services.dashboard_service import DashboardService
from smart_gastos.services.formatters import expense_for_display

expenses_bp = Blueprint('expenses', __name__)


@expenses_bp.route('', methods=['GET'])
def listar_despesas():
    """
    Lista as despesas lançadas no mês

    ?display=1 inclui id numérico e valor formatado para o cliente
    """
    try:
        despesas = DashboardService(get_store()).month_expenses(month_param())
    except ValueError as e:
        return error(str(e), 400)

    if request.args.get('display'):
        return success([expense_for_display(e) for e in despesas])
    return success([e.to_dict() for e in despesas])


@expenses_bp.route('', methods=['POST'])
def adicionar_despesa():
    """
    Body: {"amount": 150.5, "description": "...", "category": "...", "date": "YYYY-MM-DD"}
    """
    try:
        expense = DashboardService(get_store()).add_expense(json_body())
    except ValueError as e:
        return error(str(e), 400)

    return success(expense.to_dict(), 'Despesa adicionada com sucesso', 201)


@expenses_bp.route('/recent', methods=['GET'])
def despesas_recentes():
    try:
        despesas = DashboardService(get_store()).recent_expenses(month_param())
    except ValueError as e:
        return error(str(e), 400)

    return success([e.to_dict() for e in despesas])


@expenses_bp.route('/<expense_id>', methods=['GET'])
def obter_despesa(expense_id):
    expense = get_store().get_expense_by_id(expense_id)
    if not expense:
        return error('Despesa não encontrada', 404)

    return success(expense.to_dict())


@expenses_bp.route('/<expense_id>', methods=['PUT'])
def atualizar_despesa(expense_id):
    try:
        expense = DashboardService(get_store()).update_expense(expense_id, json_body())
    except ValueError as e:
        return error(str(e), 400)

    if not expense:
        return error('Despesa não encontrada', 404)

    return success(expense.to_dict(), 'Despesa atualizada com sucesso')


@expenses_bp.route('/<expense_id>', methods=['DELETE'])
def deletar_despesa(expense_id):
    if not DashboardService(get_store()).delete_expense(expense_id):
        return error('Despesa não encontrada', 404)

    return success(message='Despesa deletada com sucesso')
