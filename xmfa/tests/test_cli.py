#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

from unittest import TestCase, main
from os.path import join, dirname, realpath
from shutil import rmtree
from tempfile import mkdtemp

from click.testing import CliRunner

from xmfa.cli import cli, info_cmd
from xmfa.errors import MalformedCoordinateLine


class CliTests(TestCase):
    def setUp(self):
        self.tmpdir = mkdtemp()
        self.datdir = join(dirname(realpath(__file__)), 'data')
        self.runner = CliRunner()

    def tearDown(self):
        rmtree(self.tmpdir)

    def test_cli(self):
        self.assertRaises(SystemExit, cli)
        res = self.runner.invoke(cli, ['--help'])
        self.assertEqual(res.exit_code, 0)
        self.assertIn('info', res.output)

    def test_info(self):
        fp = join(self.datdir, 'parsnp.xmfa')
        res = self.runner.invoke(info_cmd, ['--input', fp])
        self.assertEqual(res.exit_code, 0)
        exp = ('Input XMFA file: parsnp.xmfa.\n'
               'Format version: Parsnp v1.1.\n'
               'Number of sequences: 3.\n'
               'Number of intervals declared: 2.\n'
               '  1\t1000_1.fna.ref\t1000\t>genome1 random\n')
        self.assertTrue(res.output.startswith(exp))
        self.assertIn('Reading alignment blocks... Done.\n', res.output)
        self.assertIn('  Number of alignment blocks: 2.\n', res.output)
        self.assertIn('  Number of aligned records: 6.\n', res.output)
        self.assertIn('  Total alignment columns: 1000.\n', res.output)

        # strict mode
        res = self.runner.invoke(info_cmd, ['-i', fp, '--strict', '--no-exe'])
        self.assertEqual(res.exit_code, 0)

        # malformed file
        fp = join(self.tmpdir, 'bad.xmfa')
        with open(fp, 'w') as f:
            f.write('#FormatVersion Parsnp v1.1\n#SequenceCount 1\n'
                    '#IntervalCount 1\n>abc-999 +cluster1\nACGT\n=\n')
        res = self.runner.invoke(info_cmd, ['-i', fp])
        self.assertNotEqual(res.exit_code, 0)
        self.assertIsInstance(res.exception, MalformedCoordinateLine)

        # missing file
        res = self.runner.invoke(info_cmd, ['-i', join(self.tmpdir, 'x')])
        self.assertEqual(res.exit_code, 2)


if __name__ == '__main__':
    main()
