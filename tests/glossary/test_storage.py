"""
Unit tests for the PageStorage module.
"""

import os
import shutil
import sys
import tempfile

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "../../glossary"))

from storage import PageStorage, open_source


def _read(directory, file_name):
    with open(os.path.join(directory, file_name), "r", encoding="utf-8") as handle:
        return handle.read()


def _html_files(directory):
    if not os.path.isdir(directory):
        return []
    return sorted(name for name in os.listdir(directory) if name.endswith(".html"))


class TestPageStorage:
    """Test suite for the PageStorage class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.output_dir = os.path.join(self.temp_dir, "site", "glossary")
        self.storage = PageStorage(self.output_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_ensure_layout_creates_directory(self):
        assert not os.path.isdir(self.output_dir)
        self.storage.ensure_layout()
        assert os.path.isdir(self.output_dir)

        # Existing directory is fine
        self.storage.ensure_layout()

    def test_write_term_page(self):
        self.storage.ensure_layout()
        path = self.storage.write_term_page("apple", "a fruit")

        assert path.name == "apple.html"
        content = _read(self.output_dir, "apple.html")
        assert "<title>apple</title>" in content
        assert "<blockquote>a fruit</blockquote>" in content

    def test_write_same_page_twice(self):
        self.storage.ensure_layout()
        self.storage.write_term_page("apple", "a fruit")
        first = _read(self.output_dir, "apple.html")
        self.storage.write_term_page("apple", "a fruit")

        assert _html_files(self.output_dir) == ["apple.html"]
        assert _read(self.output_dir, "apple.html") == first

    def test_write_index(self):
        self.storage.ensure_layout()
        path = self.storage.write_index(["apple", "banana"])

        assert path == self.storage.index_path
        content = _read(self.output_dir, "index.html")
        assert content.endswith("</ul>\n</body>\n</html>\n")
        assert content.index("apple.html") < content.index("banana.html")

    def test_pages_are_utf8(self):
        self.storage.ensure_layout()
        self.storage.write_term_page("smørrebrød", "an open sandwich")
        assert "smørrebrød.html" in _html_files(self.output_dir)
        assert "<title>smørrebrød</title>" in _read(self.output_dir, "smørrebrød.html")

    @pytest.mark.parametrize("term", ["", ".", "..", "a/b", "nul\x00"])
    def test_unusable_page_names(self, term):
        with pytest.raises(ValueError):
            self.storage.page_path(term)

    def test_page_path(self):
        assert self.storage.page_path("apple") == self.storage.pages_dir / "apple.html"

    def test_write_to_missing_directory_raises(self):
        with pytest.raises(OSError):
            self.storage.write_term_page("apple", "a fruit")


class TestOpenSource:
    """Test suite for open_source."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_reads_lines(self):
        path = os.path.join(self.temp_dir, "terms.txt")
        with open(path, "w", encoding="utf-8") as handle:
            handle.write("apple\na fruit\n")

        with open_source(path) as source:
            lines = list(source)

        assert lines == ["apple\n", "a fruit\n"]
        assert source.closed

    def test_missing_file(self):
        with pytest.raises(FileNotFoundError, match="Input file not found"):
            with open_source(os.path.join(self.temp_dir, "missing.txt")):
                pass

    def test_directory_is_not_a_source(self):
        with pytest.raises(FileNotFoundError):
            with open_source(self.temp_dir):
                pass


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
