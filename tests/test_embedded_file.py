"""Tests for embedded file rendering."""

import os
import tempfile
import threading
import unittest
from concurrent.futures import ThreadPoolExecutor

from pyonenote.exceptions import FilenameDisambiguationFailure, WriteFailure
from pyonenote.models import EmbeddedFile, FileType, NoteTag
from pyonenote.rendering.attachments import (
    FileRegistry,
    determine_filename,
    guess_type,
)
from pyonenote.rendering.renderer import Renderer


class DetermineFilenameTest(unittest.TestCase):
    def test_dedup_in_scope(self):
        registry = FileRegistry()
        self.assertEqual(determine_filename(registry, "img.png"), "img.png")
        self.assertEqual(determine_filename(registry, "img.png"), "img-0.png")
        self.assertEqual(determine_filename(registry, "img.png"), "img-1.png")
        self.assertEqual(len(registry), 3)

    def test_scopes_are_independent(self):
        first, second = FileRegistry(), FileRegistry()
        self.assertEqual(determine_filename(first, "img.png"), "img.png")
        self.assertEqual(determine_filename(second, "img.png"), "img.png")

    def test_skips_taken_candidates(self):
        registry = FileRegistry()
        registry.claim("img-0.png")
        determine_filename(registry, "img.png")
        self.assertEqual(determine_filename(registry, "img.png"), "img-1.png")

    def test_concurrent_claims_get_distinct_names(self):
        registry = FileRegistry()
        workers = 16
        barrier = threading.Barrier(workers)

        def claim(_):
            barrier.wait()
            return determine_filename(registry, "img.png")

        with ThreadPoolExecutor(max_workers=workers) as pool:
            names = list(pool.map(claim, range(workers)))

        expected = {"img.png"} | {f"img-{i}.png" for i in range(workers - 1)}
        self.assertEqual(len(set(names)), workers)
        self.assertEqual(set(names), expected)
        self.assertEqual(len(registry), workers)

    def test_last_extension_only(self):
        registry = FileRegistry()
        determine_filename(registry, "backup.tar.gz")
        self.assertEqual(
            determine_filename(registry, "backup.tar.gz"), "backup.tar-0.gz"
        )

    def test_no_extension(self):
        registry = FileRegistry()
        self.assertEqual(determine_filename(registry, "README"), "README")
        with self.assertRaises(FilenameDisambiguationFailure):
            determine_filename(registry, "README")

    def test_outside_output_dir(self):
        for name in ("../evil.png", "/etc/passwd.txt", ""):
            with self.subTest(name=name):
                with self.assertRaises(FilenameDisambiguationFailure):
                    determine_filename(FileRegistry(), name)

    def test_not_utf8(self):
        with self.assertRaises(FilenameDisambiguationFailure):
            determine_filename(FileRegistry(), "bad\udcff.png")


class GuessTypeTest(unittest.TestCase):
    def test_declared_type_wins(self):
        file = EmbeddedFile(filename="data.bin", file_type=FileType.AUDIO)
        self.assertEqual(guess_type(file), FileType.AUDIO)

    def test_from_extension(self):
        cases = {
            "song.mp3": FileType.AUDIO,
            "clip.mp4": FileType.VIDEO,
            "data.bin": FileType.UNKNOWN,
            "notes": FileType.UNKNOWN,
        }
        for filename, expected in cases.items():
            with self.subTest(filename=filename):
                self.assertEqual(guess_type(EmbeddedFile(filename=filename)), expected)


class RenderEmbeddedFileTest(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.out = self._tmp.name
        self.renderer = Renderer(self.out)

    def tearDown(self):
        self._tmp.cleanup()

    def _read(self, name):
        with open(os.path.join(self.out, name), "rb") as f:
            return f.read()

    def test_audio(self):
        html = self.renderer.render_embedded_file(
            EmbeddedFile(filename="song.mp3", data=b"ID3")
        )
        self.assertEqual(html, '<audio controls src="song.mp3"></audio>')
        self.assertEqual(self._read("song.mp3"), b"ID3")

    def test_video(self):
        html = self.renderer.render_embedded_file(
            EmbeddedFile(filename="clip.mp4", data=b"\x00")
        )
        self.assertEqual(html, '<video controls src="clip.mp4"></video>')

    def test_unknown(self):
        html = self.renderer.render_embedded_file(
            EmbeddedFile(filename="data.bin", data=b"\x01\x02")
        )
        self.assertEqual(html, '<embed src="data.bin">')
        self.assertEqual(self._read("data.bin"), b"\x01\x02")

    def test_same_name_twice(self):
        self.renderer.render_embedded_file(EmbeddedFile(filename="a.mp3", data=b"1"))
        html = self.renderer.render_embedded_file(
            EmbeddedFile(filename="a.mp3", data=b"2")
        )
        self.assertEqual(html, '<audio controls src="a-0.mp3"></audio>')
        self.assertEqual(self._read("a.mp3"), b"1")
        self.assertEqual(self._read("a-0.mp3"), b"2")

    def test_note_tags_wrap_markup(self):
        html = self.renderer.render_embedded_file(
            EmbeddedFile(
                filename="a.mp3", data=b"1", note_tags=[NoteTag(checkable=True)]
            )
        )
        self.assertEqual(
            html,
            '<div><input type="checkbox" disabled> '
            '<audio controls src="a.mp3"></audio></div>',
        )

    def test_write_failure(self):
        renderer = Renderer(os.path.join(self.out, "missing", "dir"))
        with self.assertRaises(WriteFailure) as ctx:
            renderer.render_embedded_file(EmbeddedFile(filename="a.mp3", data=b"1"))
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertTrue(ctx.exception.path.endswith("a.mp3"))


if __name__ == "__main__":
    unittest.main()
