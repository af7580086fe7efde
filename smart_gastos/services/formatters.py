"""
Adaptadores de apresentação

Conversões puras entre os registros do store e o formato exibido pelo
cliente: moeda em real, percentuais, cores de categoria e ids numéricos.
"""
import re
from datetime import date

CORES_CATEGORIAS = {
    'Alimentação': '#FF6B6B',
    'Transporte': '#4ECDC4',
    'Casa': '#45B7D1',
    'Saúde': '#96CEB4',
    'Entretenimento': '#FFEAA7',
    'Vestuário': '#DDA0DD',
    'Educação': '#98D8C8',
    'Outros': '#F7DC6F',
}
COR_PADRAO = '#95A5A6'

# Faixa reservada para ids de assinaturas no cliente
BASE_ID_ASSINATURA = 100000


def format_currency(valor):
    """Formata valor como moeda BR (R$ 1.234,56)"""
    texto = f"{abs(valor):,.2f}".replace(',', 'X').replace('.', ',').replace('X', '.')
    if valor < 0:
        return f"-R$ {texto}"
    return f"R$ {texto}"


def parse_currency(texto):
    """
    Converte o texto digitado no campo de valor para número

    Apenas os dígitos são considerados, interpretados como centavos:
    'R$ 1.234,56' -> 1234.56
    """
    digitos = re.sub(r'\D', '', texto or '')
    return int(digitos) / 100 if digitos else 0


def format_percentage(valor):
    return f"{valor:.1f}%"


def color_for_category(categoria):
    return CORES_CATEGORIAS.get(categoria, COR_PADRAO)


def hash32(texto):
    """Hash de 32 bits com sinal (h * 31 + c), estável entre execuções"""
    h = 0
    for caractere in texto:
        h = ((h << 5) - h + ord(caractere)) & 0xFFFFFFFF
    return h - 0x100000000 if h >= 0x80000000 else h


def numeric_id(expense):
    """
    Id numérico para o cliente

    - ids numéricos são mantidos
    - despesas de assinatura ('sub-...') vão para a faixa a partir de 100000
    - demais ids (uuid) derivam de descrição + categoria + data
    """
    if expense.id.isdigit():
        return int(expense.id)
    if expense.is_virtual:
        return BASE_ID_ASSINATURA + abs(hash32(expense.id))
    return abs(hash32(expense.description + expense.category + expense.date))


def expense_for_display(expense):
    dados = expense.to_dict()
    dados['numericId'] = numeric_id(expense)
    dados['formattedAmount'] = format_currency(expense.amount)
    return dados


def category_chart(resumos):
    """
    Converte CategorySummary para o formato do gráfico de pizza

    Returns:
        list[dict]: [{name, value, color, percentage, formattedValue}]
    """
    return [
        {
            'name': resumo.category,
            'value': resumo.total_spent,
            'color': color_for_category(resumo.category),
            'percentage': format_percentage(resumo.percentage),
            'formattedValue': format_currency(resumo.total_spent)
        }
        for resumo in resumos
    ]


def current_month(hoje=None):
    """Mês atual no formato YYYY-MM"""
    hoje = hoje or date.today()
    return hoje.strftime('%Y-%m')
