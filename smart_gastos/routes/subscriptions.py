"""
Rotas para gerenciamento de Assinaturas

Endpoints:
- GET    /api/subscriptions              - Lista todas as assinaturas
- POST   /api/subscriptions              - Cria assinatura
- GET    /api/subscriptions/active       - Apenas assinaturas ativas
- GET    /api/subscriptions/total-cost   - Custo mensal das assinaturas ativas
- GET    /api/subscriptions/analytics    - Análise das assinaturas ativas
- GET    /api/subscriptions/<id>         - Obtém assinatura
- PUT    /api/subscriptions/<id>         - Atualização parcial
- PATCH  /api/subscriptions/<id>/toggle  - Alterna Active <-> Cancelled
- DELETE /api/subscriptions/<id>         - Remove assinatura
"""
from flask import Blueprint

from smart_gastos.routes.helpers import error, get_store, json_body, success
from smart_gastos.services.subscription_service import SubscriptionService

subscriptions_bp = Blueprint('subscriptions', __name__)


@subscriptions_bp.route('', methods=['GET'])
def listar_assinaturas():
    return success([s.to_dict() for s in get_store().get_all_subscriptions()])


@subscriptions_bp.route('', methods=['POST'])
def criar_assinatura():
    """
    Body: {"name", "category", "amount", "nextPayment", "status" (opcional)}
    """
    try:
        subscription = SubscriptionService(get_store()).create(json_body())
    except ValueError as e:
        return error(str(e), 400)

    return success(subscription.to_dict(), 'Assinatura adicionada com sucesso', 201)


@subscriptions_bp.route('/active', methods=['GET'])
def listar_ativas():
    return success([s.to_dict() for s in get_store().get_active_subscriptions()])


@subscriptions_bp.route('/total-cost', methods=['GET'])
def custo_total():
    return success({'totalCost': get_store().get_total_subscription_cost()})


@subscriptions_bp.route('/analytics', methods=['GET'])
def analise_assinaturas():
    return success(SubscriptionService(get_store()).analytics())


@subscriptions_bp.route('/<subscription_id>', methods=['GET'])
def obter_assinatura(subscription_id):
    subscription = get_store().get_subscription_by_id(subscription_id)
    if not subscription:
        return error('Assinatura não encontrada', 404)

    return success(subscription.to_dict())


@subscriptions_bp.route('/<subscription_id>', methods=['PUT'])
def atualizar_assinatura(subscription_id):
    try:
        subscription = SubscriptionService(get_store()).update(subscription_id, json_body())
    except ValueError as e:
        return error(str(e), 400)

    if not subscription:
        return error('Assinatura não encontrada', 404)

    return success(subscription.to_dict(), 'Assinatura atualizada com sucesso')


@subscriptions_bp.route('/<subscription_id>/toggle', methods=['PATCH'])
def alternar_status(subscription_id):
    subscription = SubscriptionService(get_store()).toggle_status(subscription_id)
    if not subscription:
        return error('Assinatura não encontrada', 404)

    return success(subscription.to_dict(), 'Status da assinatura atualizado')


@subscriptions_bp.route('/<subscription_id>', methods=['DELETE'])
def deletar_assinatura(subscription_id):
    if not SubscriptionService(get_store()).delete(subscription_id):
        return error('Assinatura não encontrada', 404)

    return success(message='Assinatura deletada com sucesso')
