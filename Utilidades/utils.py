import numpy as np
import matplotlib.pyplot as plt

from CamadaFisica.rastreamento import VIOLATION_THRESHOLD

def text_to_binary(text):
    """
    Converte uma string de texto para uma sequência contínua de bits (UTF-8, 8 bits por byte).
    Permite alimentar qualquer uma das codificações com texto (sempre em bytes completos).
    Caracteres ASCII ocupam 1 byte; os demais ocupam de 2 a 4 bytes.

    Args:
        text (str): Texto de entrada.

    Returns:
        str: String de bits concatenados (ex: "0100100001100101...").
    """
    return ''.join(format(byte, '08b') for byte in text.encode('utf-8'))

def running_sum(signal):
    """
    Soma acumulada do sinal ao longo do tempo (balanço DC).

    Args:
        signal (array-like): Níveis ou trits emitidos.

    Returns:
        np.ndarray: Soma corrente após cada símbolo.
    """
    return np.cumsum(np.asarray(signal, dtype=int))

def format_trace(steps):
    """
    Gera uma representação textual numerada das etapas da conversão, para exibição em console.

    Args:
        steps (list[Step]): Etapas registradas pelo codificador.

    Returns:
        str: Texto com uma etapa por bloco.
    """
    lines = []
    for index, step in enumerate(steps):
        lines.append(f"{index + 1}. {step.title}")
        lines.extend(f"   > {line}" for line in step.content)
        if step.balance is not None:
            violation = " (DC Balance Violation)" if step.balance.is_violation else ""
            lines.append(f"   Running Sum: {step.balance.sum}{violation}")
            if step.balance.correction:
                lines.append(f"   Balance Correction: {step.balance.correction}")
        if step.data is not None:
            lines.append(f"   Signal at this step: {step.data}")
    return "\n".join(lines)

def plot_waveform(signal, title, show_balance=False, show=True):
    """
    Plota o sinal codificado em degraus (um símbolo por unidade de tempo).
    Para 8B6T, sobrepõe a soma corrente (balanço DC) e os limites de ±3.

    Args:
        signal (array-like): Níveis (2B1Q) ou trits (8B6T).
        title (str): Título do gráfico.
        show_balance (bool, opcional): Desenha a soma corrente e os limites de balanço.
        show (bool, opcional): Exibe a janela ao final.

    Returns:
        matplotlib.figure.Figure: Figura gerada.
    """
    signal = np.asarray(signal, dtype=int)
    # Repete o último nível para que o último símbolo também ocupe uma unidade de tempo.
    t = np.arange(len(signal) + 1)
    levels = np.append(signal, signal[-1:]) if len(signal) else signal

    fig = plt.figure(figsize=(15, 4))
    if len(signal):
        plt.step(t, levels, where='post', color='#4f46e5', linewidth=2, label='Sinal')

    if show_balance and len(signal):
        sums = running_sum(signal)
        plt.plot(np.arange(len(sums)) + 0.5, sums, linestyle='--', color='#ef4444', linewidth=1.5,
                 marker='o', markersize=2, label='DC Balance (Running Sum)')
        plt.axhline(VIOLATION_THRESHOLD, color='#ef4444', linestyle=':', alpha=0.5)
        plt.axhline(-VIOLATION_THRESHOLD, color='#ef4444', linestyle=':', alpha=0.5)
        plt.legend(loc='upper right')

    plt.title(title, fontsize=14)
    plt.xlabel("Time (t)", fontsize=12)
    plt.ylabel("Amplitude", fontsize=12)
    plt.grid(True)
    plt.axhline(0, color='black', linewidth=0.5)

    # Escala mínima de ±3 (maior nível do 2B1Q), com margem.
    max_val = max([3] + [abs(int(v)) for v in signal])
    if show_balance and len(signal):
        max_val = max(max_val, int(np.max(np.abs(running_sum(signal)))))
    plt.ylim(-max_val - 0.5, max_val + 0.5)

    plt.tight_layout()
    if show:
        plt.show()
    return fig
