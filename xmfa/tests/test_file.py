#!/usr/bin/env python3

# ----------------------------------------------------------------------------
# Copyright (c) 2020--, Qiyun Zhu.
#
# Distributed under the terms of the Modified BSD License.
#
# The full license is in the file LICENSE, distributed with this software.
# ----------------------------------------------------------------------------

from unittest import TestCase, main
from os.path import join
from shutil import rmtree
from tempfile import mkdtemp
import gzip
import bz2
import lzma

from xmfa.file import openzip, readzip


class FileTests(TestCase):
    def setUp(self):
        self.tmpdir = mkdtemp()

    def tearDown(self):
        rmtree(self.tmpdir)

    def test_openzip(self):
        text = '#FormatVersion Parsnp v1.1\n'

        # read regular file
        fp = join(self.tmpdir, 'test.xmfa')
        with open(fp, 'w') as f:
            f.write(text)
        with openzip(fp) as f:
            self.assertEqual(f.read(), text)

        # read compressed files
        for ext, lib in (('.gz', gzip), ('.bz2', bz2), ('.xz', lzma)):
            fpz = fp + ext
            with lib.open(fpz, 'wb') as f:
                f.write(text.encode())
            with openzip(fpz) as f:
                self.assertEqual(f.read(), text)

    def test_readzip(self):
        text = '#FormatVersion Parsnp v1.1\n'

        # read regular file
        fp = join(self.tmpdir, 'test.xmfa')
        with open(fp, 'w') as f:
            f.write(text)
        with readzip(fp) as f:
            self.assertEqual(f.read(), text)
        with readzip(fp, {}) as f:
            self.assertEqual(f.read(), text)

        # read compressed file using Python library
        fpz = join(self.tmpdir, 'test.xmfa.gz')
        with gzip.open(fpz, 'wb') as f:
            f.write(text.encode())
        with readzip(fpz) as f:
            self.assertEqual(f.read(), text)

        # read compressed file using external program if available
        zippers = {}
        with readzip(fpz, zippers) as f:
            self.assertEqual(f.read(), text)
        self.assertIn('gzip', zippers)

        # pretend that external program does not exist
        zippers = {'gzip': False}
        with readzip(fpz, zippers) as f:
            self.assertEqual(f.read(), text)


if __name__ == '__main__':
    main()
