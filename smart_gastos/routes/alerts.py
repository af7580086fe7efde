"""
Rotas da API para Alertas

Endpoints:
- GET /api/alerts?month=YYYY-MM - Alertas de orçamento, categorias, assinaturas e tendência
"""
from flask import Blueprint

from smart_gastos.routes.helpers import error, get_store, month_param, success
from smart_gastos.services.alert_service import AlertService
from smart_gastos.services.validation import require_month

alerts_bp = Blueprint('alerts', __name__)


@alerts_bp.route('', methods=['GET'])
def listar_alertas():
    try:
        month = require_month(month_param())
    except ValueError as e:
        return error(str(e), 400)

    return success(AlertService(get_store()).alerts_for_month(month))
