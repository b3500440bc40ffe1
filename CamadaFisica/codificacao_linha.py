# CamadaFisica/codificacao_linha.py

import logging
import numpy as np

from CamadaFisica.rastreamento import TraceRecorder, BalanceDiagnostic
from CamadaFisica.validacao import validate, SCHEME_2B1Q, SCHEME_8B6T

logger = logging.getLogger(__name__)

# Opções de codificação exibidas ao usuário.
CODIFICACOES_LINHA = {
    SCHEME_2B1Q: "2B1Q (2 Binary, 1 Quaternary)",
    SCHEME_8B6T: "8B6T (8 Binary, 6 Ternary)",
}

# Tabela 2B1Q: par de bits -> (nível se anterior positivo, nível se anterior não positivo)
TABELA_2B1Q = {
    '00': (1, -1),
    '01': (3, -3),
    '10': (-1, 1),
    '11': (-3, 3),
}

NUM_TRITS = 6  # Dígitos ternários por byte no 8B6T

CORRECAO_POSITIVOS = "Converted positive values to negative to reduce DC bias"
CORRECAO_INVERSAO = "Inverted all values to prevent DC accumulation"


class ConversionResult:
    """Sinal codificado (níveis ou trits, em ordem de emissão) acompanhado das etapas da conversão."""

    def __init__(self, signal, steps):
        self.signal = np.array(signal, dtype=int)
        self.steps = steps

    def __len__(self):
        return len(self.signal)


class DCState:
    """
    Estado carregado entre bytes no 8B6T:
    - running_sum: soma acumulada de todos os trits emitidos
    - previous_code: código final do byte anterior (vazio antes do primeiro byte)
    """

    def __init__(self, running_sum=0, previous_code=()):
        self.running_sum = running_sum
        self.previous_code = tuple(previous_code)

    @property
    def previous_sum(self):
        return sum(self.previous_code)

    def __repr__(self):
        return f"DCState(running_sum={self.running_sum}, previous_code={list(self.previous_code)})"


def split_symbols(bits, size):
    """Divide a sequência de bits em blocos consecutivos de tamanho fixo, sem sobreposição."""
    return [bits[i:i+size] for i in range(0, len(bits), size)]


def _format_code(code):
    return f"[{', '.join(str(t) for t in code)}]"


def _describe_level(level):
    if level == 0:
        return 'neutral'
    return 'positive' if level > 0 else 'negative'


class LineEncoder:
    """Implementa as codificações de linha multinível 2B1Q e 8B6T.
    Atua na Camada Física, convertendo bits em níveis de sinal e registrando cada decisão tomada.
    """

    def encode(self, bits, encoding_type):
        """
        Interface para selecionar e aplicar a codificação de linha.

        Parâmetros:
        - bits: sequência binária já validada para a codificação.
        - encoding_type: tipo de codificação (2B1Q ou 8B6T).
        """
        if encoding_type == SCHEME_2B1Q:
            return self.encode_2b1q(bits)
        elif encoding_type == SCHEME_8B6T:
            return self.encode_8b6t(bits)
        else:
            raise ValueError(f"Tipo de codificação desconhecido: {encoding_type}")

    def convert(self, bits, encoding_type):
        """
        Valida a entrada e, se válida, aplica a codificação.
        Retorna (ConversionResult, ValidationResult); em caso de falha o resultado é None
        e a validação informa o tipo e a mensagem do erro.
        """
        validation = validate(bits, encoding_type)
        if not validation:
            logger.warning(f"convert: entrada rejeitada para {encoding_type}: {validation.message}")
            return None, validation
        return self.encode(bits, encoding_type), validation

    # --- 2B1Q ---

    def next_level_2b1q(self, pair, previous_level):
        """
        Seleciona o nível do par usando apenas o sinal do nível anterior.
        Nível anterior 0 (início da transmissão) conta como não positivo.
        """
        if_positive, if_not_positive = TABELA_2B1Q[pair]
        return if_positive if previous_level > 0 else if_not_positive

    def encode_2b1q(self, bits):
        """
        Implementa a codificação 2B1Q (2 Binary, 1 Quaternary):
        Cada par de bits vira um nível em {-3, -1, 1, 3}; a polaridade depende do nível anterior.
        """
        if not bits:
            return ConversionResult([], [])

        pairs = split_symbols(bits, 2)
        trace = TraceRecorder()
        levels = []
        previous_level = 0

        trace.record('Input Analysis', [
            f"Binary Input: {bits}",
            f"Length: {len(bits)} bits",
            f"Number of pairs: {len(pairs)}",
        ])
        trace.record('Grouping into Pairs', [f"Pair {i + 1}: {pair}" for i, pair in enumerate(pairs)])

        for index, pair in enumerate(pairs):
            next_level = self.next_level_2b1q(pair, previous_level)
            levels.append(next_level)
            trace.record(f"Converting Pair {index + 1}", [
                f"Input pair: {pair}",
                f"Previous level: {_describe_level(previous_level)}",
                f"Applied rule: {pair} → {next_level}",
                f"Output level: {next_level}",
            ], data=levels)
            previous_level = next_level

        logger.debug(f"encode_2b1q: {len(pairs)} pares -> {len(levels)} níveis")
        return ConversionResult(levels, trace.steps)

    # --- 8B6T ---

    def byte_to_ternary(self, decimal):
        """Decompõe o valor do byte em 6 dígitos base 3 (menos significativo primeiro), deslocados para {-1, 0, 1}."""
        return [(decimal // 3 ** i) % 3 - 1 for i in range(NUM_TRITS)]

    def correct_positive_sum(self, code, state):
        """
        Primeira correção de balanço DC: soma o código à soma corrente e, se a soma do byte
        for positiva, converte todo trit +1 em -1 (cada troca reduz a soma corrente em 2).
        A decisão usa a soma capturada antes das trocas.

        Retorna (código corrigido, novo DCState, soma original do código).
        """
        original_sum = sum(code)
        running_sum = state.running_sum + original_sum
        balanced = list(code)
        if original_sum > 0:
            for i in range(len(balanced)):
                if balanced[i] == 1:
                    balanced[i] = -1
                    running_sum -= 2
        return balanced, DCState(running_sum, state.previous_code), original_sum

    def correct_alternation(self, code, state):
        """
        Segunda correção: se a soma do código atual e a do código anterior tiverem o mesmo
        sinal estrito (ambas > 0 ou ambas < 0), inverte todos os trits. Soma zero nunca dispara.

        Retorna (código final, novo DCState, True se houve inversão).
        """
        current_sum = sum(code)
        previous_sum = state.previous_sum
        if (current_sum > 0 and previous_sum > 0) or (current_sum < 0 and previous_sum < 0):
            inverted = [-t for t in code]
            return inverted, DCState(state.running_sum - current_sum * 2, state.previous_code), True
        return list(code), state, False

    def encode_8b6t(self, bits):
        """
        Implementa a codificação 8B6T (8 Binary, 6 Ternary):
        Cada byte vira 6 trits em {-1, 0, 1}, seguidos de duas correções de balanço DC
        que dependem da soma corrente global e do código final do byte anterior.
        """
        if not bits:
            return ConversionResult([], [])

        byte_chunks = split_symbols(bits, 8)
        trace = TraceRecorder()
        ternary = []
        state = DCState()

        trace.record('Input Analysis', [
            f"Binary Input: {bits}",
            f"Length: {len(bits)} bits",
            f"Number of bytes: {len(byte_chunks)}",
        ])
        trace.record('Grouping into Bytes', [f"Byte {i + 1}: {byte}" for i, byte in enumerate(byte_chunks)])

        for index, byte in enumerate(byte_chunks):
            number = index + 1
            decimal = int(byte, 2)
            code = self.byte_to_ternary(decimal)
            trace.record(f"Converting Byte {number}", [
                f"Input byte: {byte}",
                f"Decimal value: {decimal}",
                f"Initial ternary code: {_format_code(code)}",
            ])

            balanced, state, original_sum = self.correct_positive_sum(code, state)
            if original_sum > 0:
                trace.record(f"DC Balance for Byte {number}", [
                    f"Initial sum: {original_sum}",
                    f"Original code: {_format_code(code)}",
                    f"Balanced code: {_format_code(balanced)}",
                ], balance=BalanceDiagnostic(state.running_sum, CORRECAO_POSITIVOS))

            previous_sum = state.previous_sum
            final_code, state, inverted = self.correct_alternation(balanced, state)
            if inverted:
                trace.record(f"DC Accumulation Check for Byte {number}", [
                    f"Previous sum: {previous_sum}",
                    f"Current sum: {sum(balanced)}",
                    f"Original code: {_format_code(balanced)}",
                    f"Inverted code: {_format_code(final_code)}",
                ], balance=BalanceDiagnostic(state.running_sum, CORRECAO_INVERSAO))

            state = DCState(state.running_sum, final_code)
            ternary.extend(final_code)

            trace.record(f"Final Output for Byte {number}", [
                f"Final ternary code: {_format_code(final_code)}",
            ], data=ternary, balance=BalanceDiagnostic(state.running_sum))
            logger.debug(f"encode_8b6t: byte {number} ({byte}) -> {final_code}, soma corrente={state.running_sum}")

        return ConversionResult(ternary, trace.steps)
