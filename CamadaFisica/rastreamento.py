# CamadaFisica/rastreamento.py

import logging

logger = logging.getLogger(__name__)

# Limite da soma corrente (em módulo) acima do qual o balanço DC é considerado violado.
VIOLATION_THRESHOLD = 3


class BalanceDiagnostic:
    """Diagnóstico de balanço DC anexado a uma etapa da codificação 8B6T.
    Apenas informativo: uma violação nunca interrompe a codificação.
    """

    def __init__(self, running_sum, correction=None):
        self.sum = running_sum
        self.is_violation = abs(running_sum) > VIOLATION_THRESHOLD
        self.correction = correction

    def to_dict(self):
        return {'sum': self.sum, 'is_violation': self.is_violation, 'correction': self.correction}

    def __eq__(self, other):
        if not isinstance(other, BalanceDiagnostic):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"BalanceDiagnostic(sum={self.sum}, is_violation={self.is_violation}, correction={self.correction!r})"


class Step:
    """
    Registro de uma etapa da conversão:
    - title: título da etapa (ex: "Converting Pair 1")
    - content: linhas de descrição, em ordem
    - data: instantâneo opcional do sinal emitido até esta etapa
    - balance: diagnóstico opcional de balanço DC
    """

    def __init__(self, title, content, data=None, balance=None):
        self.title = title
        self.content = list(content)
        self.data = list(data) if data is not None else None
        self.balance = balance

    def to_dict(self):
        return {
            'title': self.title,
            'content': list(self.content),
            'data': list(self.data) if self.data is not None else None,
            'balance': self.balance.to_dict() if self.balance is not None else None,
        }

    def __eq__(self, other):
        if not isinstance(other, Step):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"Step(title={self.title!r}, content={self.content!r}, data={self.data!r}, balance={self.balance!r})"


class TraceRecorder:
    """Acumulador passivo das etapas emitidas pelos codificadores, na ordem em que ocorrem."""

    def __init__(self):
        self.steps = []

    def record(self, title, content, data=None, balance=None):
        step = Step(title, content, data, balance)
        self.steps.append(step)
        logger.debug(f"record: etapa {len(self.steps)} '{title}'")
        return step

    def __len__(self):
        return len(self.steps)
