import unittest

from y2l.validation import is_valid_instagram_url, is_valid_youtube_url


class ValidationTest(unittest.TestCase):

    def test_youtube_allowed_hosts(self):
        for url in [
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
        ]:
            self.assertTrue(is_valid_youtube_url(url), url)

    def test_youtube_query_is_not_inspected(self):
        url = "https://www.youtube.com/watch?v=abc&list=PL1&t=42s&junk=<>\"'"
        self.assertTrue(is_valid_youtube_url(url))

    def test_youtube_host_case_insensitive(self):
        self.assertTrue(is_valid_youtube_url("https://WWW.YouTube.com/watch?v=abc"))

    def test_youtube_rejects_other_hosts(self):
        for url in [
            "https://vimeo.com/123",
            "https://music.youtube.com/watch?v=abc",
            "https://youtube.com.evil.example/watch?v=abc",
            "https://notyoutube.com/watch?v=abc",
        ]:
            self.assertFalse(is_valid_youtube_url(url), url)

    def test_youtube_length_bound(self):
        base = "https://youtube.com/watch?v="
        self.assertTrue(is_valid_youtube_url(base + "a" * (199 - len(base))))
        self.assertFalse(is_valid_youtube_url(base + "a" * (200 - len(base))))

    def test_malformed_input_is_rejected_without_raising(self):
        for url in ["not a url", "", "youtube.com/watch?v=abc", "https://", "http://[::1", None, 42]:
            self.assertFalse(is_valid_youtube_url(url), url)
            self.assertFalse(is_valid_instagram_url(url), url)

    def test_instagram_paths(self):
        self.assertTrue(is_valid_instagram_url("https://www.instagram.com/reel/C1a2b3/"))
        self.assertTrue(is_valid_instagram_url("https://instagram.com/p/C1a2b3/?igsh=x"))
        self.assertFalse(is_valid_instagram_url("https://www.instagram.com/stories/someone/1/"))
        self.assertFalse(is_valid_instagram_url("https://www.instagram.com/someone"))
        self.assertFalse(is_valid_instagram_url("https://m.instagram.com/reel/C1a2b3/"))

    def test_instagram_length_bound(self):
        url = "https://www.instagram.com/reel/" + "a" * 200
        self.assertFalse(is_valid_instagram_url(url))
