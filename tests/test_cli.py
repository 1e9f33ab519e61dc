"""
Unit tests for the catalog check command.
"""
from portfolio.cli import check_catalogs, main


class TestCheckCatalogs:
    """Tests for check_catalogs"""

    def test_bundled_catalogs_pass(self, capsys):
        assert check_catalogs() == 0
        out = capsys.readouterr().out
        assert "[tr] ok" in out
        assert "[ar] missing: blog.thanks.title" in out

    def test_strict_fails_on_gaps(self):
        assert check_catalogs(strict=True) == 1

    def test_placeholder_mismatch_fails(self, capsys):
        catalogs = {"en": {"c": "© {{year}}"}, "tr": {"c": "©"}, "ar": {"c": "© {{year}}"}, "it": {"c": "© {{year}}"}}
        assert check_catalogs(catalogs=catalogs) == 1
        assert "[tr] placeholder mismatch: c" in capsys.readouterr().out

    def test_missing_reference(self):
        assert check_catalogs(catalogs={"tr": {}}) == 1

    def test_main_entry(self):
        assert main(["check-catalogs"]) == 0
