import json
import tempfile
import unittest
from pathlib import Path

from truthcheck_backend.corpus import load_corpus, parse_corpus
from truthcheck_backend.errors import CorpusLoadError, VerifierError

from helpers import make_posts, write_corpus


class CorpusLoaderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.directory = Path(self._tmp.name)

    def test_loads_posts_in_file_order(self):
        path = write_corpus(self.directory, make_posts(["first post", "second post"]))
        posts = load_corpus(path)
        self.assertEqual([post.id for post in posts], ["1", "2"])
        self.assertEqual(posts[1].content, "second post")
        self.assertEqual(posts[0].favourites_count, 30)

    def test_passes_through_unconsulted_fields_and_ignores_extras(self):
        raw = json.dumps(
            [
                {
                    "id": 114000000000000001,
                    "created_at": "2025-01-20T17:00:00.000Z",
                    "content": "<p>Hello</p>",
                    "url": "https://truthsocial.com/@realDonaldTrump/114000000000000001",
                    "media": ["https://static.truthsocial.com/a.jpg"],
                    "replies_count": 1,
                    "reblogs_count": 2,
                    "favourites_count": 3,
                    "card": None,
                }
            ]
        )
        (post,) = parse_corpus(raw)
        self.assertEqual(post.id, "114000000000000001")
        self.assertEqual(post.media, ["https://static.truthsocial.com/a.jpg"])
        self.assertEqual((post.replies_count, post.reblogs_count, post.favourites_count), (1, 2, 3))

    def test_missing_optional_fields_get_defaults(self):
        (post,) = parse_corpus('[{"id": "7", "content": "bare"}]')
        self.assertEqual(post.media, [])
        self.assertEqual(post.replies_count, 0)
        self.assertEqual(post.url, "")

    def test_missing_file_raises_load_error(self):
        missing = self.directory / "nope.json"
        with self.assertRaises(CorpusLoadError) as ctx:
            load_corpus(missing)
        self.assertEqual(ctx.exception.path, str(missing))
        self.assertIsInstance(ctx.exception.__cause__, OSError)
        self.assertIsInstance(ctx.exception, VerifierError)

    def test_invalid_json_raises_load_error(self):
        path = self.directory / "broken.json"
        path.write_text("[{not json", encoding="utf-8")
        with self.assertRaises(CorpusLoadError):
            load_corpus(path)

    def test_non_array_raises_load_error(self):
        with self.assertRaises(CorpusLoadError):
            parse_corpus('{"id": "1", "content": "x"}')

    def test_one_bad_record_rejects_whole_corpus(self):
        raw = json.dumps([{"id": "1", "content": "fine"}, {"id": "2"}])
        with self.assertRaises(CorpusLoadError):
            parse_corpus(raw)

    def test_empty_array_is_valid(self):
        self.assertEqual(parse_corpus("[]"), [])


if __name__ == "__main__":
    unittest.main()
