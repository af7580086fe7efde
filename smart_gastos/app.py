"""
Aplicação Flask - Smart Gastos API

Este arquivo inicializa a aplicação Flask e configura rotas, armazenamento
em memória e tratamento de erros
"""
import logging
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from smart_gastos.config import get_config, resolve_environment
from smart_gastos.data_store import DataStore
from smart_gastos.seed import populate_sample_data

logger = logging.getLogger(__name__)


def create_app(config_name=None, data_store=None):
    """
    Factory para criar a aplicação Flask

    Args:
        config_name: Nome da configuração ('development', 'production', 'testing')
        data_store: DataStore a ser usado (um novo é criado se omitido)

    Returns:
        app: Instância configurada do Flask
    """
    app = Flask(__name__)

    # Configuração baseada no ambiente
    config_name = resolve_environment(config_name)

    app.config.from_object(get_config(config_name))
    app.config['ENVIRONMENT'] = config_name

    configure_logging(app)

    app.json.ensure_ascii = app.config['JSON_AS_ASCII']
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    CORS(
        app,
        origins=[app.config['FRONTEND_URL']],
        supports_credentials=True
    )

    # Armazenamento em memória, um por aplicação
    app.data_store = data_store if data_store is not None else DataStore()
    if app.config['SEED_DATA']:
        populate_sample_data(app.data_store)

    # Registrar blueprints (rotas)
    register_blueprints(app)

    # Registrar handlers de erro
    register_error_handlers(app)

    @app.route('/health')
    def health():
        """Health check para monitoramento"""
        return jsonify({
            'success': True,
            'message': 'Smart Gastos API está funcionando',
            'environment': config_name,
            'timestamp': datetime.now(timezone.utc).isoformat()
        })

    return app


def configure_logging(app):
    nivel = getattr(logging, str(app.config['LOG_LEVEL']).upper(), logging.INFO)
    logging.basicConfig(
        level=nivel,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    logging.getLogger('smart_gastos').setLevel(nivel)


def register_blueprints(app):
    """
    Registra os blueprints (módulos de rotas)

    Args:
        app: Instância do Flask
    """
    # Importar blueprints aqui para evitar importação circular
    from smart_gastos.routes.alerts import alerts_bp
    from smart_gastos.routes.dashboard import dashboard_bp
    from smart_gastos.routes.expenses import expenses_bp
    from smart_gastos.routes.history import history_bp
    from smart_gastos.routes.reports import reports_bp
    from smart_gastos.routes.subscriptions import subscriptions_bp

    app.register_blueprint(dashboard_bp, url_prefix='/api')
    app.register_blueprint(expenses_bp, url_prefix='/api/expenses')
    app.register_blueprint(subscriptions_bp, url_prefix='/api/subscriptions')
    app.register_blueprint(history_bp, url_prefix='/api/history')
    app.register_blueprint(reports_bp, url_prefix='/api/reports')
    app.register_blueprint(alerts_bp, url_prefix='/api/alerts')


def register_error_handlers(app):
    """
    Registra handlers para tratamento de erros

    Args:
        app: Instância do Flask
    """

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({
            'success': False,
            'error': f'Rota {request.method} {request.path} não encontrada'
        }), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({
            'success': False,
            'error': f'Método {request.method} não permitido para {request.path}'
        }), 405

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'success': False, 'error': 'Requisição inválida'}), 400

    @app.errorhandler(Exception)
    def internal_error(error):
        if isinstance(error, HTTPException):
            return jsonify({'success': False, 'error': error.description}), error.code

        logger.error('Erro não tratado em %s %s', request.method, request.path, exc_info=error)

        resposta = {'success': False, 'error': 'Erro interno do servidor'}
        if app.config['EXPOSE_ERROR_DETAILS']:
            resposta['message'] = str(error)
        return jsonify(resposta), 500


def main():
    """Inicia o servidor de desenvolvimento"""
    app = create_app()
    porta = app.config['PORT']

    logger.info('Servidor rodando na porta %s', porta)
    logger.info('API disponível em http://localhost:%s', porta)
    logger.info('Health check em http://localhost:%s/health', porta)

    app.run(
        host='0.0.0.0',
        port=porta,
        debug=app.config['DEBUG']
    )


if __name__ == '__main__':
    main()
