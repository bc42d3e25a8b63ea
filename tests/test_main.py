import io
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest import mock

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from wired_downloader.article_pipeline import download_article, validate_url
from wired_downloader.errors import FetchError, ValidationError
from wired_downloader.main import cli_main


class FakeResponse:
    def __init__(self, status_code: int = 200, body: str = "", reason: str = "OK") -> None:
        self.status_code = status_code
        self.reason = reason
        self.content = body.encode("utf-8")
        self.headers = {"content-type": "text/html"}


class FakeSession:
    def __init__(self, response) -> None:
        self.response = response

    def get(self, url, **kwargs):
        return self.response


PAGE = '<html><body><div class="article-body"><p>Para one</p></div></body></html>'


def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = cli_main(argv)
    return code, out.getvalue(), err.getvalue()


class ValidateUrlTests(unittest.TestCase):
    def test_requires_site_marker(self) -> None:
        validate_url("https://www.wired.com/story/x/")
        with self.assertRaises(ValidationError):
            validate_url("https://example.com/story/x/")


class DownloadArticleTests(unittest.TestCase):
    def test_saves_slug_named_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = FakeSession(FakeResponse(body="<p>Body text</p>"))
            path = download_article(
                "https://www.wired.com/story/my article!",
                output_dir=tmp,
                session=session,
            )
            self.assertEqual(path, os.path.join(os.path.abspath(tmp), "my_article!.txt"))
            with open(path, encoding="utf-8", newline="") as f:
                self.assertEqual(f.read(), "my article!\n\nBody text")

    def test_http_404_creates_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = os.path.join(tmp, "Documents", "Wired")
            session = FakeSession(FakeResponse(status_code=404, reason="Not Found"))
            with self.assertRaises(FetchError):
                download_article("https://www.wired.com/story/gone", output_dir=target, session=session)
            self.assertFalse(os.path.exists(target))

    def test_invalid_url_is_rejected_before_fetching(self) -> None:
        session = mock.Mock()
        with self.assertRaises(ValidationError):
            download_article("https://example.com/story/x", session=session)
        session.get.assert_not_called()


class CliTests(unittest.TestCase):
    def test_missing_argument_is_usage_error(self) -> None:
        code, out, err = _run([])
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("Usage: wired-downloader", err)

    def test_invalid_url_exits_nonzero(self) -> None:
        code, _, err = _run(["https://example.com/story/x"])
        self.assertEqual(code, 1)
        self.assertIn("valid Wired.com article URL", err)

    def test_success_prints_absolute_path(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch(
                "wired_downloader.article_pipeline.build_session",
                return_value=FakeSession(FakeResponse(body=PAGE)),
            ):
                code, out, err = _run(["https://www.wired.com/story/cool-thing/", "--output-dir", tmp])
            expected = os.path.join(os.path.abspath(tmp), "cool-thing.txt")
            self.assertEqual(code, 0)
            self.assertIn(expected, out)
            self.assertEqual(err, "")
            with open(expected, encoding="utf-8", newline="") as f:
                self.assertEqual(f.read(), "cool-thing\n\nPara one\n\nPara one")

    def test_extra_arguments_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch(
                "wired_downloader.article_pipeline.build_session",
                return_value=FakeSession(FakeResponse(body=PAGE)),
            ):
                code, _, _ = _run(["https://www.wired.com/story/a", "extra", "--output-dir", tmp])
            self.assertEqual(code, 0)
            self.assertTrue(os.path.exists(os.path.join(tmp, "a.txt")))

    def test_fetch_failure_reports_stage(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch(
                "wired_downloader.article_pipeline.build_session",
                return_value=FakeSession(FakeResponse(status_code=500, reason="Server Error")),
            ):
                code, out, err = _run(["https://www.wired.com/story/a", "--output-dir", tmp])
            self.assertEqual(code, 1)
            self.assertEqual(out, "")
            self.assertIn("Error fetching article", err)
            self.assertIn("500", err)

    def test_verbose_logs_to_stderr(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch(
                "wired_downloader.article_pipeline.build_session",
                return_value=FakeSession(FakeResponse(body=PAGE)),
            ):
                code, out, err = _run(["https://www.wired.com/story/a", "--output-dir", tmp, "-v"])
            self.assertEqual(code, 0)
            self.assertIn("Requesting https://www.wired.com/story/a", err)
            self.assertEqual(out.count("\n"), 1)


if __name__ == "__main__":
    unittest.main()
