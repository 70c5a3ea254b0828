"""Tests for the properties format codec."""

from config_transcoder.escaping import escape_key, escape_value, unescape_value
from config_transcoder.formats.properties_format import PropertiesCodec, parse_line
from config_transcoder.types import FlatEntry
from config_transcoder.values import Value


class TestParseLine:
    """Tests for single-line parsing."""

    def test_equals_delimiter(self):
        """Test key=value lines."""
        assert parse_line("key=value") == ("key", "value")

    def test_colon_delimiter(self):
        """Test key:value lines."""
        assert parse_line("key:value") == ("key", "value")

    def test_first_delimiter_wins(self):
        """Test that later delimiters belong to the value."""
        assert parse_line("url=jdbc:postgresql://db:5432/app") == ("url", "jdbc:postgresql://db:5432/app")

    def test_spaces_around_delimiter_are_trimmed(self):
        """Test trimming of key and value."""
        assert parse_line("k = v") == ("k", "v")

    def test_escaped_delimiters_in_key(self):
        """Test that escaped characters become part of the key."""
        assert parse_line("a\\=b\\:c\\ d=value") == ("a=b:c d", "value")

    def test_value_escapes_are_kept_raw(self):
        """Test that the value keeps its escape sequences."""
        assert parse_line("k=a\\nb") == ("k", "a\\nb")

    def test_line_without_delimiter(self):
        """Test that a bare key has an empty value."""
        assert parse_line("flag") == ("flag", "")

    def test_empty_key_is_discarded(self):
        """Test that a line with an empty key yields nothing."""
        assert parse_line("=value") is None
        assert parse_line(":value") is None


class TestPropertiesCodec:
    """Tests for PropertiesCodec class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = PropertiesCodec()

    def test_comments_and_blank_lines_are_skipped(self, sample_properties):
        """Test skipping of # and ! comments and blank lines."""
        entries = self.codec.parse_entries(sample_properties)

        assert entries == {
            "server.host": "localhost",
            "server.port": "8080",
            "server.debug": "false",
            "database.pool.size": "10",
            "name": "demo app",
        }

    def test_comment_then_entry(self):
        """Test a comment line followed by a spaced entry."""
        assert self.codec.parse_entries("# comment\nk = v") == {"k": "v"}

    def test_indented_comment(self):
        """Test that comment markers are recognized after leading whitespace."""
        assert self.codec.parse_entries("   # indented\n\t! also\nk=v") == {"k": "v"}

    def test_duplicate_keys_last_wins(self):
        """Test that a repeated key keeps its last value."""
        assert self.codec.parse_entries("dup=1\nother=x\ndup=2") == {"dup": "2", "other": "x"}

    def test_windows_line_endings(self):
        """Test CRLF input."""
        assert self.codec.parse_entries("a=1\r\nb=2\r\n") == {"a": "1", "b": "2"}

    def test_parse_builds_typed_tree(self, sample_properties):
        """Test parsing into a nested tree with inferred types."""
        tree = self.codec.parse(sample_properties)

        assert tree == Value.from_native({
            "server": {"host": "localhost", "port": 8080, "debug": False},
            "database": {"pool": {"size": 10}},
            "name": "demo app",
        })

    def test_write_entries_sorted_without_trailing_newline(self):
        """Test that output lines are sorted by key in codepoint order."""
        text = self.codec.write_entries({"b": "2", "a": "1", "B": "3"})
        assert text == "B=3\na=1\nb=2"

    def test_write_flat_entries(self):
        """Test writing FlatEntry items."""
        text = self.codec.write_entries([FlatEntry("z", "1"), FlatEntry("a.b", "x y")])
        assert text == "a.b=x y\nz=1"

    def test_write_empty(self):
        """Test that no entries give empty text."""
        assert self.codec.write_entries({}) == ""

    def test_serialize_sorts_regardless_of_declaration_order(self):
        """Test that serialization does not follow tree order."""
        tree = Value.from_native({"zeta": 1, "alpha": {"b": 2, "a": 3}})
        assert self.codec.serialize(tree) == "alpha.a=3\nalpha.b=2\nzeta=1"

    def test_null_and_spaced_values(self):
        """Test null values and spaces inside values."""
        tree = Value.from_native({"x": None, "y": "hi there"})
        assert self.codec.serialize(tree) == "x=\ny=hi there"

    def test_reserialization_is_idempotent(self):
        """Test serialize, parse, serialize gives identical text."""
        tree = Value.from_native({
            "server": {"host": "example.com", "port": 8080, "debug": False},
            "name": "demo app",
            "path": "C:\\temp\\new",
            "motd": "line1\nline2",
        })

        first = self.codec.serialize(tree)
        second = self.codec.serialize(self.codec.parse(first))

        assert first == second


class TestEscaping:
    """Tests for escape rules."""

    def setup_method(self):
        """Set up test fixtures."""
        self.codec = PropertiesCodec()

    def test_escape_key(self):
        """Test escaping of backslash, =, : and space in keys."""
        assert escape_key("a b=c:d\\e") == "a\\ b\\=c\\:d\\\\e"

    def test_escape_value(self):
        """Test escaping of backslash, newline and carriage return in values."""
        assert escape_value("a\\b\nc\rd") == "a\\\\b\\nc\\rd"

    def test_value_does_not_escape_delimiters_or_spaces(self):
        """Test that only backslash and line breaks are escaped in values."""
        assert escape_value("a=b:c d") == "a=b:c d"

    def test_unescape_value(self):
        """Test decoding of known and unknown escapes."""
        assert unescape_value("a\\nb\\rc\\td") == "a\nb\rc\td"
        assert unescape_value("\\=\\:\\ \\\\") == "=: \\"
        assert unescape_value("trailing\\") == "trailing"

    def test_special_characters_round_trip(self):
        """Test that keys and values with special characters survive a round trip."""
        key = "my key:x=y\\z"
        value = "a\\b=c:d e\nf\rg"

        text = self.codec.write_entries({key: value})
        tree = self.codec.parse(text)

        assert tree.keys() == [key]
        assert tree.get(key) == Value.string(value)

    def test_tab_in_value_is_written_literally(self):
        """Test that tabs are not escaped on write.

        The reader understands \\t but the writer emits a raw tab, so a tab
        at either end of a value is lost to trimming on the next read.
        """
        text = self.codec.write_entries({"inner": "a\tb", "edge": "ab\t"})

        assert text == "edge=ab\t\ninner=a\tb"
        assert "\\t" not in text

        tree = self.codec.parse(text)
        assert tree.get("inner") == Value.string("a\tb")
        assert tree.get("edge") == Value.string("ab")
