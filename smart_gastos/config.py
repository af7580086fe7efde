"""
Configurações da aplicação por ambiente
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Diretório base do projeto
BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / '.env')
load_dotenv(BASE_DIR / '.env.local')  # Para desenvolvimento


def _env_flag(name, default=False):
    valor = os.getenv(name)
    if valor is None:
        return default
    return valor.strip().lower() in ('1', 'true', 'yes', 'sim')


class Config:
    """Configuração base"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-me')

    # Servidor
    PORT = int(os.getenv('PORT', '3001'))
    FRONTEND_URL = os.getenv('FRONTEND_URL', 'http://localhost:5173')

    # JSON
    JSON_AS_ASCII = False
    JSON_SORT_KEYS = False

    # CORS
    CORS_HEADERS = 'Content-Type'

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Mensagem real da exceção nas respostas 500
    EXPOSE_ERROR_DETAILS = False

    # Popular o store com o cenário de exemplo ao iniciar
    SEED_DATA = _env_flag('SEED_DATA')


class DevelopmentConfig(Config):
    """Configuração de desenvolvimento"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'DEBUG')
    EXPOSE_ERROR_DETAILS = True
    SEED_DATA = _env_flag('SEED_DATA', default=True)


class ProductionConfig(Config):
    """Configuração de produção"""
    DEBUG = False
    TESTING = False


class TestingConfig(Config):
    """Configuração de testes"""
    TESTING = True
    DEBUG = True
    EXPOSE_ERROR_DETAILS = True
    SEED_DATA = False
    LOG_LEVEL = 'WARNING'


# Dicionário de configurações
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_environment():
    """Nome do ambiente atual (FLASK_ENV tem prioridade sobre NODE_ENV)"""
    return os.getenv('FLASK_ENV') or os.getenv('NODE_ENV') or 'development'


def resolve_environment(env=None):
    """
    Nome do ambiente efetivamente usado

    Nomes desconhecidos caem em 'development', o mesmo ambiente de
    config['default'].
    """
    if env is None:
        env = get_environment()

    if env not in config or env == 'default':
        return 'development'
    return env


def get_config(env=None):
    """
    Retorna a configuração baseada no ambiente

    Args:
        env: Nome do ambiente ('development', 'production', 'testing')

    Returns:
        Classe de configuração apropriada
    """
    return config[resolve_environment(env)]
