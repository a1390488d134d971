#!/usr/bin/env python3
"""
Tests for content sniffing, filename handling and the in-memory volume.
"""

import os
import sys
import unittest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from scriptvol.exceptions import FileNameError
from scriptvol.persistence import (
    FileCategory,
    FileInfo,
    FilenameUtils,
    KSM_MAGIC,
    OperationResult,
    ProgramFile,
    ResultKind,
    Volume,
    identify_category,
)


class TestIdentifyCategory(unittest.TestCase):

    def test_compiled_signature(self):
        self.assertEqual(identify_category(KSM_MAGIC + b'\x00\x00'), FileCategory.KSM)
        self.assertEqual(identify_category(KSM_MAGIC), FileCategory.KSM)

    def test_too_short(self):
        self.assertEqual(identify_category(b''), FileCategory.TOOSHORT)
        self.assertEqual(identify_category(b'ab'), FileCategory.TOOSHORT)
        self.assertEqual(identify_category(KSM_MAGIC[:3]), FileCategory.TOOSHORT)

    def test_script_text(self):
        self.assertEqual(identify_category(b'print "hi".'), FileCategory.KERBOSCRIPT)
        self.assertEqual(identify_category(b'\t\r\n// comment'), FileCategory.KERBOSCRIPT)

    def test_other(self):
        self.assertEqual(identify_category(b'\x00\x01\x02\x03'), FileCategory.OTHER)
        self.assertEqual(identify_category(b'\xef\xbb\xbfprint 1.'), FileCategory.OTHER)

    def test_category_flags(self):
        self.assertTrue(FileCategory.OTHER.is_text)
        self.assertFalse(FileCategory.KSM.is_text)
        self.assertTrue(FileCategory.ASCII.normalizes_line_endings)
        self.assertFalse(FileCategory.TOOSHORT.normalizes_line_endings)


class TestFilenameUtils(unittest.TestCase):

    def test_splitext(self):
        self.assertEqual(FilenameUtils.splitext('boot'), ('boot', ''))
        self.assertEqual(FilenameUtils.splitext('boot.ks'), ('boot', '.ks'))
        self.assertEqual(FilenameUtils.splitext('lib.v2.ksm'), ('lib.v2', '.ksm'))
        self.assertEqual(FilenameUtils.splitext('.profile'), ('.profile', ''))
        self.assertEqual(FilenameUtils.splitext('boot.'), ('boot.', ''))
        self.assertEqual(FilenameUtils.splitext('ships.d/boot'), ('ships.d/boot', ''))

    def test_has_extension(self):
        self.assertTrue(FilenameUtils.has_extension('boot.ks'))
        self.assertFalse(FilenameUtils.has_extension('boot'))
        self.assertFalse(FilenameUtils.has_extension('/tmp/x.y/boot'))

    def test_bare_name(self):
        self.assertEqual(FilenameUtils.bare_name('/a/b/boot.ks'), 'boot')
        self.assertEqual(FilenameUtils.bare_name('boot'), 'boot')

    def test_cook_forced(self):
        self.assertEqual(FilenameUtils.cooked_filename('boot', 'ks', True), 'boot.ks')
        self.assertEqual(FilenameUtils.cooked_filename('boot.ks', 'ks', True), 'boot.ks')
        self.assertEqual(FilenameUtils.cooked_filename('boot.txt', 'ksm', True), 'boot.ksm')
        self.assertEqual(FilenameUtils.cooked_filename('/s/boot', '.ksm', True), '/s/boot.ksm')

    def test_cook_trailing_dot(self):
        self.assertEqual(FilenameUtils.cooked_filename('boot.', 'ks', True), 'boot.ks')
        self.assertEqual(FilenameUtils.cooked_filename('boot.', 'ksm'), 'boot.ksm')
        self.assertEqual(FilenameUtils.cooked_filename('lib.v2.', 'ks', True), 'lib.v2.ks')

    def test_cook_unforced(self):
        self.assertEqual(FilenameUtils.cooked_filename('boot', 'ks'), 'boot.ks')
        self.assertEqual(FilenameUtils.cooked_filename('boot.txt', 'ks'), 'boot.txt')

    def test_cook_rejects_empty(self):
        with self.assertRaises(FileNameError):
            FilenameUtils.cooked_filename('', 'ks', True)
        with self.assertRaises(FileNameError):
            FilenameUtils.cooked_filename('boot', '', True)


class TestProgramFile(unittest.TestCase):

    def test_text_file(self):
        f = ProgramFile('boot', string_content='print 1.')
        self.assertEqual(f.category, FileCategory.KERBOSCRIPT)
        self.assertEqual(f.size, 8)
        self.assertEqual(f.extension, 'ks')
        self.assertFalse(f.is_binary)

    def test_binary_file(self):
        f = ProgramFile('prog', binary_content=KSM_MAGIC)
        self.assertEqual(f.category, FileCategory.KSM)
        self.assertEqual(f.extension, 'ksm')
        self.assertIsNone(f.string_content)

    def test_content_is_exclusive(self):
        f = ProgramFile('boot', string_content='print 1.')
        f.binary_content = KSM_MAGIC
        self.assertIsNone(f.string_content)
        self.assertEqual(f.category, FileCategory.KSM)

        f.string_content = 'print 2.'
        self.assertIsNone(f.binary_content)
        self.assertEqual(f.category, FileCategory.KERBOSCRIPT)

        with self.assertRaises(ValueError):
            ProgramFile('both', string_content='x', binary_content=b'x')

    def test_text_category_kept(self):
        f = ProgramFile('log', category=FileCategory.ASCII, string_content='x')
        self.assertEqual(f.category, FileCategory.ASCII)

    def test_copy_and_equality(self):
        f = ProgramFile('boot', string_content='print 1.')
        self.assertEqual(f.copy(), f)
        self.assertIsNot(f.copy(), f)

    def test_file_info(self):
        info = FileInfo.from_program_file(ProgramFile('prog', binary_content=KSM_MAGIC))
        self.assertEqual(info.filename, 'prog.ksm')
        self.assertEqual(info.size, 4)


class TestVolume(unittest.TestCase):

    def test_save_and_load(self):
        vol = Volume('scratch')
        f = ProgramFile('boot', string_content='print 1.')
        self.assertTrue(vol.save(f))
        self.assertIs(vol.load('boot'), f)
        self.assertIsNone(vol.load('missing'))

    def test_capacity(self):
        vol = Volume('small', capacity=10)
        self.assertTrue(vol.save(ProgramFile('a', string_content='12345678')))
        self.assertEqual(vol.free_space(), 2)
        self.assertFalse(vol.save(ProgramFile('b', string_content='123')))
        # Replacing a file reuses its space.
        self.assertTrue(vol.save(ProgramFile('a', string_content='1234567890')))
        self.assertEqual(Volume('big').free_space(), Volume.UNLIMITED)

    def test_rename_and_delete(self):
        vol = Volume('scratch')
        vol.save(ProgramFile('a', string_content='x'))
        vol.save(ProgramFile('b', string_content='y'))

        self.assertFalse(vol.rename('a', 'b'))
        self.assertTrue(vol.rename('a', 'c'))
        self.assertEqual(vol.get('c').name, 'c')
        self.assertTrue(vol.delete('c'))
        self.assertFalse(vol.delete('c'))
        self.assertEqual([i.name for i in vol.list_files()], ['b'])

    def test_volume_name(self):
        vol = Volume('scratch')
        vol.name = 'renamed'
        self.assertEqual(vol.name, 'renamed')
        self.assertAlmostEqual(vol.required_power(), Volume.BASE_POWER)


class TestOperationResult(unittest.TestCase):

    def test_kinds(self):
        self.assertTrue(OperationResult.success(1).ok)
        self.assertEqual(OperationResult.success(1).value, 1)
        self.assertEqual(OperationResult.not_found().kind, ResultKind.NOT_FOUND)

        err = OSError('disk')
        failed = OperationResult.failure(err)
        self.assertFalse(failed.ok)
        self.assertIs(failed.error, err)
        self.assertEqual(OperationResult.violation(err).kind, ResultKind.CONTRACT_VIOLATION)


if __name__ == '__main__':
    unittest.main(verbosity=2)
