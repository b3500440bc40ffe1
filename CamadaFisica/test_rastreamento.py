# CamadaFisica/test_rastreamento.py

import unittest
from CamadaFisica.rastreamento import TraceRecorder, Step, BalanceDiagnostic

class TestRastreamento(unittest.TestCase):
    def test_violacao(self):
        self.assertFalse(BalanceDiagnostic(3).is_violation)
        self.assertFalse(BalanceDiagnostic(-3).is_violation)
        self.assertTrue(BalanceDiagnostic(4).is_violation)
        self.assertTrue(BalanceDiagnostic(-6).is_violation)

    def test_record_copia_dados(self):
        trace = TraceRecorder()
        dados = [1, -1]
        step = trace.record("Converting Pair 1", ["Input pair: 00"], data=dados)
        dados.append(3)
        self.assertEqual(step.data, [1, -1])
        self.assertEqual(len(trace), 1)
        self.assertIs(trace.steps[0], step)

    def test_to_dict(self):
        step = Step("Final Output for Byte 1", ["Final ternary code: [0]"], data=[0],
                    balance=BalanceDiagnostic(-4, "nota"))
        self.assertEqual(step.to_dict(), {
            'title': "Final Output for Byte 1",
            'content': ["Final ternary code: [0]"],
            'data': [0],
            'balance': {'sum': -4, 'is_violation': True, 'correction': "nota"},
        })
        self.assertEqual(Step("Input Analysis", []).to_dict()['balance'], None)

    def test_igualdade(self):
        self.assertEqual(Step("A", ["x"], [1]), Step("A", ["x"], [1]))
        self.assertNotEqual(Step("A", ["x"], [1]), Step("A", ["x"], [2]))
        self.assertNotEqual(BalanceDiagnostic(1), BalanceDiagnostic(1, "nota"))

if __name__ == '__main__':
    unittest.main()
