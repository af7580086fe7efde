"""
Funções auxiliares compartilhadas pelas rotas
"""
from flask import current_app, jsonify, request

from smart_gastos.services.formatters import current_month


def get_store():
    """DataStore da aplicação atual"""
    return current_app.data_store


def month_param():
    """Parâmetro ?month=YYYY-MM (padrão: mês atual)"""
    return request.args.get('month') or current_month()


def json_body():
    """Corpo JSON da requisição (dict vazio se ausente ou inválido)"""
    dados = request.get_json(silent=True)
    return dados if isinstance(dados, dict) else {}


def success(data=None, message=None, status=200):
    resposta = {'success': True}
    if data is not None:
        resposta['data'] = data
    if message:
        resposta['message'] = message
    return jsonify(resposta), status


def error(mensagem, status):
    return jsonify({
        'success': False,
        'error': mensagem
    }), status
