# Utilidades/test_utils.py

import unittest
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from Utilidades import utils
from CamadaFisica.codificacao_linha import LineEncoder

class TestUtils(unittest.TestCase):
    def test_text_to_binary(self):
        self.assertEqual(utils.text_to_binary("A"), "01000001")
        self.assertEqual(utils.text_to_binary(""), "")

    def test_text_to_binary_fora_do_latin1(self):
        # '€' (U+20AC) vira os 3 bytes UTF-8 E2 82 AC
        self.assertEqual(utils.text_to_binary("€"), "111000101000001010101100")
        bits = utils.text_to_binary("€€€€")
        self.assertEqual(len(bits), 4 * 24)
        resultado, validacao = LineEncoder().convert(bits, "8B6T")
        self.assertTrue(validacao)
        self.assertEqual(len(resultado.signal), 12 * 6)

    def test_running_sum(self):
        np.testing.assert_array_equal(utils.running_sum([1, -1, -1, 0]), np.array([1, 0, -1, -1]))

    def test_format_trace(self):
        steps = LineEncoder().encode_8b6t("0000000000000000").steps
        texto = utils.format_trace(steps)
        self.assertTrue(texto.startswith("1. Input Analysis"))
        self.assertIn("Running Sum: -6 (DC Balance Violation)", texto)
        self.assertIn("Balance Correction: Inverted all values to prevent DC accumulation", texto)
        self.assertIn("Running Sum: 0\n", texto)

    def test_plot_waveform(self):
        signal = LineEncoder().encode_8b6t("00000000").signal
        fig = utils.plot_waveform(signal, "8B6T Output Signal", show_balance=True, show=False)
        ax = fig.axes[0]
        self.assertEqual(ax.get_title(), "8B6T Output Signal")
        # Soma corrente chega a -6, então o eixo Y deve cobri-la
        self.assertLessEqual(ax.get_ylim()[0], -6)
        plt.close(fig)

    def test_plot_waveform_2b1q(self):
        fig = utils.plot_waveform([-1, -3], "2B1Q Output Signal", show=False)
        self.assertEqual(fig.axes[0].get_ylim(), (-3.5, 3.5))
        plt.close(fig)

if __name__ == '__main__':
    unittest.main()
