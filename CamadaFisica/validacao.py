# CamadaFisica/validacao.py

import logging

logger = logging.getLogger(__name__)

SCHEME_2B1Q = "2B1Q"
SCHEME_8B6T = "8B6T"

# Tipos de falha de validação
INVALID_CHARACTER = "InvalidCharacter"
WRONG_LENGTH_2B1Q = "WrongLengthFor2B1Q"
WRONG_LENGTH_8B6T = "WrongLengthFor8B6T"

MENSAGENS_ERRO = {
    INVALID_CHARACTER: "Please enter only binary digits (0 or 1)",
    WRONG_LENGTH_2B1Q: "For 2B1Q, input length must be even",
    WRONG_LENGTH_8B6T: "For 8B6T, input length must be divisible by 8",
}

# Tamanho do símbolo (em bits) consumido por cada codificação.
TAMANHO_SIMBOLO = {
    SCHEME_2B1Q: 2,
    SCHEME_8B6T: 8,
}


class ValidationResult:
    """
    Resultado da validação de uma entrada binária para uma codificação de linha.
    Verdadeiro quando a entrada é válida; caso contrário, error_kind e message descrevem a falha.
    """

    def __init__(self, bits, scheme, error_kind=None):
        self.bits = bits
        self.scheme = scheme
        self.error_kind = error_kind
        self.message = MENSAGENS_ERRO.get(error_kind, "")

    @property
    def is_valid(self):
        return self.error_kind is None

    def __bool__(self):
        return self.is_valid

    def __repr__(self):
        return f"ValidationResult(scheme={self.scheme!r}, error_kind={self.error_kind!r})"


def validate(bits, scheme):
    """
    Verifica se a entrada contém apenas '0'/'1' e se o comprimento é compatível com a codificação:
    - 2B1Q: comprimento par (pares de bits)
    - 8B6T: comprimento múltiplo de 8 (bytes completos)

    Entrada vazia é aceita (resultado e rastreamento vazios).
    Lança ValueError para codificação desconhecida.
    """
    if scheme not in TAMANHO_SIMBOLO:
        raise ValueError(f"Tipo de codificação desconhecido: {scheme}")

    if any(char not in '01' for char in bits):
        logger.debug(f"validate: caractere inválido na entrada (len={len(bits)})")
        return ValidationResult(bits, scheme, INVALID_CHARACTER)

    if len(bits) % TAMANHO_SIMBOLO[scheme] != 0:
        kind = WRONG_LENGTH_2B1Q if scheme == SCHEME_2B1Q else WRONG_LENGTH_8B6T
        logger.debug(f"validate: comprimento {len(bits)} incompatível com {scheme}")
        return ValidationResult(bits, scheme, kind)

    return ValidationResult(bits, scheme)
