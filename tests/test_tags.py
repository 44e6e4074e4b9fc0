"""
Tag validation tests

Malformed tags are rejected before any line is processed.
"""

import pytest

from ecomcon import MalformedTagError, Transformer, transform
from ecomcon.lib.tags import tag_isValid, tagSet_build


class TestTagSyntax:
    """Tags are non-empty runs of [A-Za-z0-9_]"""

    @pytest.mark.parametrize("tag", ["debug", "D", "_", "0", "log_2", "ABC_def_123"])
    def test_valid_tags(self, tag):
        """Letters, digits and underscores"""
        assert tag_isValid(tag)

    @pytest.mark.parametrize(
        "tag", ["", "bad tag!", "a-b", "a.b", " a", "a\n", "é", "debug ", None, 3]
    )
    def test_invalid_tags(self, tag):
        """Empty, punctuation, whitespace, non-ASCII and non-strings"""
        assert not tag_isValid(tag)

    def test_tag_set_frozen(self):
        """tagSet_build deduplicates into a frozenset"""
        assert tagSet_build(["a", "b", "a"]) == frozenset({"a", "b"})


class TestMalformedTagError:
    """The only error the transformation raises"""

    def test_bad_tag_rejected(self):
        """A tag with a space and ! fails"""
        with pytest.raises(MalformedTagError):
            transform("//ok x", {"ok", "bad tag!"})

    def test_error_identifies_tag(self):
        """The offending tag is carried on the error"""
        with pytest.raises(MalformedTagError, match="bad tag!") as excinfo:
            tagSet_build(["fine", "bad tag!"])
        assert excinfo.value.tag == "bad tag!"

    def test_empty_tag_rejected(self):
        """The empty string is not a tag"""
        with pytest.raises(MalformedTagError):
            transform("x", [""])

    def test_error_is_value_error(self):
        """Callers may catch ValueError"""
        with pytest.raises(ValueError):
            transform("x", ["no way"])

    def test_raised_at_construction(self):
        """Transformer validates in its constructor"""
        with pytest.raises(MalformedTagError):
            Transformer({"a-b"})

    def test_raised_even_for_empty_source(self):
        """Validation does not depend on the source"""
        with pytest.raises(MalformedTagError):
            transform("", {"$"}, annotations=["note"])

    def test_unused_valid_tags_are_fine(self):
        """Tags that never appear in the source are not an error"""
        assert transform("plain", {"never_used"}) == "plain"
