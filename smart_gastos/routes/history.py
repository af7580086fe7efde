"""
Rotas da API para Histórico de Gastos

Endpoints:
- GET /api/history/expenses - Histórico com filtros (startDate, endDate, category, search) e paginação (page, limit)
- GET /api/history/stats    - Estatísticas do histórico (startDate, endDate)
- GET /api/history/period   - Gastos agrupados por período: day, week, month ou year
"""
from flask import Blueprint, request

from smart_gastos.routes.helpers import error, get_store, success
from smart_gastos.services.filters import ExpenseFilters, parse_pagination
from smart_gastos.services.history_service import HistoryService

history_bp = Blueprint('history', __name__)


@history_bp.route('/expenses', methods=['GET'])
def historico_despesas():
    try:
        page, limit = parse_pagination(request.args.get('page'), request.args.get('limit'))
    except ValueError as e:
        return error(str(e), 400)

    filtros = ExpenseFilters.from_args(request.args)
    return success(HistoryService(get_store()).expense_history(filtros, page, limit))


@history_bp.route('/stats', methods=['GET'])
def estatisticas_historico():
    stats = HistoryService(get_store()).history_stats(
        request.args.get('startDate'),
        request.args.get('endDate')
    )
    return success(stats)


@history_bp.route('/period', methods=['GET'])
def gastos_por_periodo():
    try:
        serie = HistoryService(get_store()).expenses_by_period(
            request.args.get('period') or 'month',
            request.args.get('startDate'),
            request.args.get('endDate')
        )
    except ValueError as e:
        return error(str(e), 400)

    return success(serie)
