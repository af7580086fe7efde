"""
Rotas da API para Relatórios

Endpoints:
- GET /api/reports/data        - Visão geral (startDate, endDate)
- GET /api/reports/comparison  - Comparação entre períodos (period1Start, period1End, period2Start, period2End)
- GET /api/reports/trends      - Tendência dos últimos N meses (months, padrão 6)
- GET /api/reports/category    - Relatório de uma categoria (category, startDate, endDate)
"""
from flask import Blueprint, request

from smart_gastos.routes.helpers import error, get_store, success
from smart_gastos.services.report_service import MESES_TENDENCIA_PADRAO, ReportService

reports_bp = Blueprint('reports', __name__)


@reports_bp.route('/data', methods=['GET'])
def dados_relatorios():
    dados = ReportService(get_store()).reports_data(
        request.args.get('startDate'),
        request.args.get('endDate')
    )
    return success(dados)


@reports_bp.route('/comparison', methods=['GET'])
def comparacao_periodos():
    try:
        dados = ReportService(get_store()).period_comparison(
            request.args.get('period1Start'),
            request.args.get('period1End'),
            request.args.get('period2Start'),
            request.args.get('period2End')
        )
    except ValueError as e:
        return error(str(e), 400)

    return success(dados)


@reports_bp.route('/trends', methods=['GET'])
def tendencias():
    try:
        meses = int(request.args.get('months') or MESES_TENDENCIA_PADRAO)
    except ValueError:
        return error('Parâmetro months deve ser um número inteiro', 400)

    if meses < 1:
        return error('Parâmetro months deve ser maior que zero', 400)

    return success(ReportService(get_store()).trends(meses))


@reports_bp.route('/category', methods=['GET'])
def relatorio_categoria():
    try:
        dados = ReportService(get_store()).category_report(
            request.args.get('category'),
            request.args.get('startDate'),
            request.args.get('endDate')
        )
    except ValueError as e:
        return error(str(e), 400)

    return success(dados)
