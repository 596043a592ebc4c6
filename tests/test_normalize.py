import unittest

from truthcheck_backend.lexical import STOP_WORDS, extract_significant_words, normalize_text


SAMPLES = [
    "",
    "   ",
    "The Quick  Brown\tFox!",
    "Read more at https://truthsocial.com/@realDonaldTrump/posts/1234 now",
    "D0nald J. Trump | 10/11/2024 @ 9:01 PM",
    "MAKE AMERICA GREAT AGAIN!!!",
    "Café déjà vu — “quoted”",
    "snake_case stays_intact",
]


class NormalizeTextTests(unittest.TestCase):
    def test_lowercases_and_collapses_whitespace(self):
        self.assertEqual(normalize_text("  The QUICK\n\nbrown   fox  "), "the quick brown fox")

    def test_replaces_ocr_confusions_everywhere(self):
        self.assertEqual(normalize_text("Ec0n0my 1s b|g"), "economy ls big")
        # Genuine digits are rewritten too.
        self.assertEqual(normalize_text("January 10, 2021"), "january lo 2o2l")

    def test_strips_urls(self):
        text = "Great rally! https://t.co/abc123 and http://example.com/x?y=1 tonight"
        self.assertEqual(normalize_text(text), "great rally and tonight")

    def test_punctuation_becomes_space(self):
        self.assertEqual(normalize_text("fake-news,witch hunt!!"), "fake news witch hunt")

    def test_empty_and_none(self):
        self.assertEqual(normalize_text(""), "")
        self.assertEqual(normalize_text(None), "")
        self.assertEqual(normalize_text("!!! ... ???"), "")

    def test_idempotent(self):
        for sample in SAMPLES:
            with self.subTest(sample=sample):
                once = normalize_text(sample)
                self.assertEqual(normalize_text(once), once)


class SignificantWordTests(unittest.TestCase):
    def test_filters_short_words_and_stop_words(self):
        words = extract_significant_words("the economy is doing great because of tariffs")
        self.assertEqual(words, frozenset({"economy", "doing", "great", "tariffs"}))

    def test_returns_set_without_duplicates(self):
        words = extract_significant_words("border border border big")
        self.assertEqual(words, frozenset({"border"}))

    def test_empty_input(self):
        self.assertEqual(extract_significant_words(""), frozenset())
        self.assertEqual(extract_significant_words("a an the of"), frozenset())

    def test_custom_min_length(self):
        words = extract_significant_words("big red wall", min_length=3)
        self.assertEqual(words, frozenset({"big", "red", "wall"}))

    def test_stop_words_are_lowercase(self):
        self.assertTrue(all(word == word.lower() for word in STOP_WORDS))
        self.assertIn("because", STOP_WORDS)
        self.assertIn("through", STOP_WORDS)


if __name__ == "__main__":
    unittest.main()
