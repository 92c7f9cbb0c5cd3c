import unittest

import logging
import sys

from rationals.rational import Rational, ZERO, InvalidArgument, ParseError, parse


class TestParse(unittest.TestCase):
    def setUp(self):
        logging.basicConfig(level=0, stream=sys.stdout)

    def test_parse(self):
        self.assertEqual(parse('5'), Rational(5))
        self.assertEqual(parse('-5'), Rational(-5))
        self.assertEqual(parse('3/4'), Rational(3, 4))
        self.assertEqual(parse('-3/4'), Rational(-3, 4))
        self.assertEqual(parse('0/7'), ZERO)

    def test_reduce(self):
        x = parse('117/1098')
        self.assertEqual(x, Rational(13, 122))
        self.assertEqual(str(x), '13/122')
        self.assertEqual(parse('4/-8'), Rational(-1, 2))

    def test_big(self):
        x = parse('912016490186296920119201192141970416029/1824032980372593840238402384283940832058')
        self.assertEqual(x, Rational(1, 2))

    def test_round_trip(self):
        for n in range(-12, 13):
            for d in range(1, 13):
                x = Rational(n, d)
                self.assertEqual(parse(str(x)), x)
        for n in [0, 1, -1, 10**40]:
            self.assertEqual(str(Rational(n)), str(n))

    def test_bad_text(self):
        for text in ['', '/', '1/', '/2', '1/2/3', 'a', '1.5', ' 1', '1 /2', '+1', '1_000', '--1', '1/2\n']:
            with self.assertRaises(ParseError):
                parse(text)

    def test_zero_denominator(self):
        with self.assertRaises(InvalidArgument):
            parse('1/0')
        with self.assertRaises(InvalidArgument):
            parse('0/0')

    def test_errors_distinct(self):
        assert not issubclass(ParseError, InvalidArgument)
        assert not issubclass(InvalidArgument, ParseError)

    def test_not_str(self):
        with self.assertRaises(TypeError):
            parse(12)


if __name__ == "__main__":
    unittest.main()
