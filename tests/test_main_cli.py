import io
import os
import unittest
from unittest import mock

from rich.console import Console

from app.pageset.core.pagination_set import Page, PaginationSet
from app.pageset.main import EXIT_ABSENT, EXIT_INVALID, EXIT_OK, resolve_pages, run


class TestResolvePages(unittest.TestCase):
    def test_all_pages_by_default(self):
        rows = resolve_pages(PaginationSet(5, 2))
        self.assertEqual(rows, [(1, Page(0, 2)), (2, Page(2, 2)), (3, Page(4, 1))])

    def test_single_page(self):
        self.assertEqual(resolve_pages(PaginationSet(1000, 20), page=50), [(50, Page(980, 20))])

    def test_last_page(self):
        self.assertEqual(resolve_pages(PaginationSet(1005, 20), last=True), [(51, Page(1000, 5))])

    def test_absent_without_fallback(self):
        self.assertIsNone(resolve_pages(PaginationSet(1000, 20), page=51))
        self.assertIsNone(resolve_pages(PaginationSet(0, 20), last=True))

    def test_absent_with_fallback(self):
        rows = resolve_pages(PaginationSet(0, 20), page=1, empty_fallback=True)
        self.assertEqual(rows, [(0, Page(0, 0))])

    def test_empty_collection_lists_nothing(self):
        self.assertEqual(resolve_pages(PaginationSet(0, 20)), [])


@mock.patch("app.pageset.main.setup_logging")
class TestRun(unittest.TestCase):
    def setUp(self) -> None:
        env = {k: v for k, v in os.environ.items() if not k.startswith("PAGESET_")}
        patcher = mock.patch.dict(os.environ, env, clear=True)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.out = io.StringIO()
        self.console = Console(file=self.out, width=120)

    def test_page_found(self, _setup_logging):
        code = run(["1000", "--page-size", "20", "--page", "50"], console=self.console)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("980", self.out.getvalue())

    def test_last_page(self, _setup_logging):
        code = run(["1005", "--page-size", "20", "--last"], console=self.console)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("1000", self.out.getvalue())

    def test_absent_page_exit_code(self, _setup_logging):
        code = run(["1000", "--page-size", "20", "--page", "51"], console=self.console)
        self.assertEqual(code, EXIT_ABSENT)
        self.assertEqual(self.out.getvalue(), "")

    def test_empty_fallback_flag(self, _setup_logging):
        code = run(["0", "--page", "1", "--empty-fallback"], console=self.console)
        self.assertEqual(code, EXIT_OK)

    def test_empty_fallback_from_environment(self, _setup_logging):
        os.environ["PAGESET_EMPTY_FALLBACK"] = "1"
        code = run(["0", "--last"], console=self.console)
        self.assertEqual(code, EXIT_OK)

    def test_page_size_from_environment(self, _setup_logging):
        os.environ["PAGESET_PAGE_SIZE"] = "7"
        code = run(["20", "--last"], console=self.console)
        self.assertEqual(code, EXIT_OK)
        self.assertIn("7 per page", self.out.getvalue())

    def test_zero_page_size_is_invalid(self, _setup_logging):
        code = run(["1000", "--page-size", "0"], console=self.console)
        self.assertEqual(code, EXIT_INVALID)

    def test_bad_environment_is_invalid(self, _setup_logging):
        os.environ["PAGESET_PAGE_SIZE"] = "lots"
        self.assertEqual(run(["10"], console=self.console), EXIT_INVALID)

    def test_logging_configured_from_flags(self, setup_logging):
        run(["10", "--log-level", "DEBUG"], console=self.console)
        setup_logging.assert_called_once_with("DEBUG", None)


if __name__ == "__main__":
    unittest.main()
