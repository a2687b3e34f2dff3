"""Tests for list_point_files and find_missing_directories."""
import os
import tempfile
import unittest
from pathlib import Path

from pointdup.scan.scanner import DirectoryNotFound, find_missing_directories, list_point_files


class ListPointFilesTest(unittest.TestCase):
    def test_only_matching_files_directly_inside(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / 'b.pts').write_text('')
            (root / 'a.pts').write_text('')
            (root / 'notes.txt').write_text('')
            (root / 'a.pts.bak').write_text('')
            (root / 'nested').mkdir()
            (root / 'nested' / 'deep.pts').write_text('')
            (root / 'folder.pts').mkdir()

            files = list_point_files([root])

            self.assertEqual([root / 'a.pts', root / 'b.pts'], files)

    def test_directories_concatenated_in_input_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            first = Path(tmpdir) / 'z_first'
            second = Path(tmpdir) / 'a_second'
            first.mkdir()
            second.mkdir()
            (first / 'x.pts').write_text('')
            (second / 'x.pts').write_text('')
            (second / 'y.pts').write_text('')

            files = list_point_files([str(first), str(second)])

            self.assertEqual([first / 'x.pts', second / 'x.pts', second / 'y.pts'], files)

    def test_directory_without_point_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'readme.md').write_text('')

            self.assertEqual([], list_point_files([tmpdir]))

    def test_custom_extension(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / 'a.pts').write_text('')
            (root / 'b.txt').write_text('')

            self.assertEqual([root / 'b.txt'], list_point_files([root], extension='.txt'))

    def test_missing_directory_fails_whole_batch(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            existing = Path(tmpdir) / 'existing'
            existing.mkdir()
            (existing / 'a.pts').write_text('')
            missing = Path(tmpdir) / 'missing'

            with self.assertRaises(DirectoryNotFound) as cm:
                list_point_files([existing, missing])

            self.assertEqual(missing, cm.exception.path)
            self.assertIn(str(missing), str(cm.exception))
            self.assertIsInstance(cm.exception, FileNotFoundError)

    def test_first_missing_directory_reported(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            first_missing = Path(tmpdir) / 'one'
            second_missing = Path(tmpdir) / 'two'

            with self.assertRaises(DirectoryNotFound) as cm:
                list_point_files([first_missing, second_missing])

            self.assertEqual(first_missing, cm.exception.path)

    def test_regular_file_is_not_a_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            file_path = Path(tmpdir) / 'a.pts'
            file_path.write_text('')

            with self.assertRaises(DirectoryNotFound):
                list_point_files([file_path])

    def test_blank_path_is_not_the_working_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / 'cwd.pts').write_text('')
            original_cwd = os.getcwd()
            os.chdir(tmpdir)
            try:
                for blank in ['', '   ']:
                    with self.subTest(path=blank):
                        with self.assertRaises(DirectoryNotFound):
                            list_point_files([tmpdir, blank])
            finally:
                os.chdir(original_cwd)

    def test_files_in_alphabetical_order(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            for name in ['c.pts', 'B.pts', 'a.pts']:
                (root / name).write_text('')

            self.assertEqual(['a.pts', 'B.pts', 'c.pts'], [p.name for p in list_point_files([root])])

    @unittest.skipIf(os.name == 'nt', 'symlinks need privileges on Windows')
    def test_symlinked_file_included_and_broken_symlink_skipped(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / 'points'
            root.mkdir()
            target = Path(tmpdir) / 'target.pts'
            target.write_text('')
            (root / 'linked.pts').symlink_to(target)
            (root / 'broken.pts').symlink_to(Path(tmpdir) / 'nowhere.pts')

            self.assertEqual([root / 'linked.pts'], list_point_files([root]))


class FindMissingDirectoriesTest(unittest.TestCase):
    def test_reports_every_missing_path(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            existing = Path(tmpdir)
            file_path = existing / 'file.pts'
            file_path.write_text('')
            missing = existing / 'missing'

            result = find_missing_directories([missing, str(existing), file_path])

            self.assertEqual([missing, file_path], result)

    def test_blank_paths_are_missing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertEqual([Path(''), Path(' ')], find_missing_directories(['', tmpdir, ' ']))

    def test_nothing_missing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertEqual([], find_missing_directories([tmpdir]))


if __name__ == '__main__':
    unittest.main()
