# Simulador/main.py

import argparse
import logging
import sys
import os

# Ajusta o PYTHONPATH para que os módulos das camadas possam ser importados
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.append(project_root)

from CamadaFisica.codificacao_linha import LineEncoder, CODIFICACOES_LINHA
from CamadaFisica.validacao import SCHEME_2B1Q, SCHEME_8B6T
from Utilidades import utils

logger = logging.getLogger(__name__)


def format_log(data_str, max_len=64):
    """
    Trunca strings longas no meio para facilitar visualização em logs.
    Útil para logar grandes sequências de bits de forma legível.
    """
    if len(data_str) > max_len:
        return f"{data_str[:(max_len-3)//2]}...{data_str[-(max_len-3)//2:]}"
    return data_str


class SimuladorCodificacao:
    """
    Orquestra a conversão de uma entrada (bits ou texto) em sinal multinível:
    validação, codificação 2B1Q/8B6T, exibição das etapas e, opcionalmente, o gráfico do sinal.
    """
    def __init__(self):
        self.encoder = LineEncoder()
        self._codificacao_options = CODIFICACOES_LINHA

    def get_codificacao_options(self) -> dict: return self._codificacao_options

    def simular(self, bits: str, scheme: str):
        """
        Executa a conversão completa de uma sequência de bits.

        Args:
            bits (str): Sequência binária de entrada.
            scheme (str): '2B1Q' ou '8B6T'.

        Returns:
            tuple[ConversionResult | None, ValidationResult]: resultado (None se a entrada for inválida) e validação.
        """
        logger.info(f"Codificação {scheme}: entrada {format_log(bits)} ({len(bits)} bits)")
        result, validation = self.encoder.convert(bits, scheme)
        if result is not None:
            logger.info(f"Codificação {scheme}: {len(result.signal)} símbolos gerados, {len(result.steps)} etapas")
        return result, validation


def main(argv=None):
    parser = argparse.ArgumentParser(description="Simulador de codificação de linha 2B1Q / 8B6T")
    parser.add_argument("entrada", help="Sequência binária (ou texto, com --texto)")
    parser.add_argument("codificacao", nargs="?", default=SCHEME_2B1Q, choices=[SCHEME_2B1Q, SCHEME_8B6T])
    parser.add_argument("--texto", action="store_true", help="Interpreta a entrada como texto ASCII")
    parser.add_argument("--plot", action="store_true", help="Exibe o gráfico do sinal final")
    args = parser.parse_args(argv)

    config = {
        "scheme": args.codificacao,
        "message": args.entrada if args.texto else None,
        "bits_raw_input": None if args.texto else args.entrada,
        "plot": args.plot,
    }
    bits = utils.text_to_binary(config["message"]) if config["message"] is not None else config["bits_raw_input"]

    simulador = SimuladorCodificacao()
    result, validation = simulador.simular(bits, config["scheme"])
    if result is None:
        print(f"Erro ({validation.error_kind}): {validation.message}")
        return 1

    print(f"--- {simulador.get_codificacao_options()[config['scheme']]} ---")
    print(utils.format_trace(result.steps))
    print(f"\nSinal final: {result.signal.tolist()}")

    if config["plot"] and len(result.signal):
        utils.plot_waveform(result.signal, f"{config['scheme']} Output Signal",
                            show_balance=config["scheme"] == SCHEME_8B6T)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    sys.exit(main())
