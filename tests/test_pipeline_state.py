"""
Pipeline and state tests
"""

from ecomcon.lib.directives import directive_match
from ecomcon.lib.transformer import Transformer
from ecomcon.models import DirectiveLine, TransformState, UnknownTagPolicy, pipeline


class TestDirectiveMatch:
    """Classifier for a single line"""

    def test_directive(self):
        """Tag and payload are captured"""
        assert directive_match("//debug x = 1") == DirectiveLine(tag="debug", payload="x = 1")

    def test_empty_payload(self):
        """Payload may be empty"""
        assert directive_match("//debug") == DirectiveLine(tag="debug", payload="")
        assert directive_match("//debug ") == DirectiveLine(tag="debug", payload="")

    def test_plain(self):
        """Non-directives return None"""
        assert directive_match("x = 1") is None
        assert directive_match("// debug") is None
        assert directive_match("/debug x") is None
        assert directive_match(" //debug x") is None


class TestPipeline:
    """pipeline() threads state through the stages in order"""

    def test_stage_order(self):
        """Stages run left to right"""

        def first(state):
            s = state.copy()
            s.lines = s.lines + ["first"]
            return s

        def second(state):
            s = state.copy()
            s.lines = s.lines + ["second"]
            return s

        final = pipeline(TransformState(), first, second)
        assert final.lines == ["first", "second"]

    def test_copy_is_independent(self):
        """copy() returns a new instance"""
        state = TransformState(source="x")
        clone = state.copy()
        clone.source = "y"
        assert state.source == "x"

    def test_stage_fields(self):
        """Each stage adds its fields"""
        transformer = Transformer({"on"}, policy=UnknownTagPolicy.SUPPRESS)
        state = TransformState(
            source="a\r\n//on b\n//off c",
            tags=frozenset({"on"}),
            annotations=("note",),
        )
        state = transformer.tags_validate(state)
        assert state.activeTags == frozenset({"on"})

        state = transformer.source_split(state)
        assert state.lines == ["a", "//on b", "//off c"]

        state = transformer.lines_rewrite(state)
        assert state.rewritten == ["a", "b"]
        assert state.suppressedCount == 1

        state = transformer.output_join(state)
        assert state.output == "// note\na\nb"
