import unittest

from y2l.models import DEFAULT_REEL_TITLE, reel_info_from_dump, video_info_from_dump


class ModelsTest(unittest.TestCase):

    def test_video_info_full(self):
        info = video_info_from_dump({
            "title": "Never Gonna Give You Up",
            "duration": 212,
            "thumbnail": "https://i.ytimg.com/vi/x/hq.jpg",
            "uploader": "Rick Astley",
            "channel": "RickAstleyVEVO",
        })
        self.assertEqual(info.title, "Never Gonna Give You Up")
        self.assertEqual(info.duration, 212)
        self.assertEqual(info.thumbnail, "https://i.ytimg.com/vi/x/hq.jpg")
        self.assertEqual(info.author, "Rick Astley")

    def test_video_info_defaults(self):
        info = video_info_from_dump({"title": "t", "duration": None})
        self.assertEqual(info.duration, 0)
        self.assertEqual(info.thumbnail, "")
        self.assertEqual(info.author, "")

    def test_author_falls_back_to_channel(self):
        self.assertEqual(video_info_from_dump({"channel": "Chan"}).author, "Chan")

    def test_fractional_duration_truncates(self):
        self.assertEqual(video_info_from_dump({"duration": 12.7}).duration, 12)

    def test_non_finite_duration_defaults(self):
        self.assertEqual(video_info_from_dump({"duration": float("inf")}).duration, 0)
        self.assertEqual(video_info_from_dump({"duration": float("nan")}).duration, 0)

    def test_reel_title_from_description(self):
        info = reel_info_from_dump({"description": "d" * 150})
        self.assertEqual(info.title, "d" * 100)

    def test_reel_default_title(self):
        self.assertEqual(reel_info_from_dump({}).title, DEFAULT_REEL_TITLE)

    def test_reel_prefers_title(self):
        self.assertEqual(reel_info_from_dump({"title": "Reel", "description": "x"}).title, "Reel")
