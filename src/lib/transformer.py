"""
Conditional comment transformer

Turns tagged comment lines on or off. Given the active tags:

    //debug console.log("state", state);

becomes live code when "debug" is active, and is dropped (SUPPRESS policy)
or left as a comment (PASSTHROUGH policy) otherwise. All other lines pass
through unchanged, and caller annotations are prepended as comment lines.

The transformation runs as a pipeline of stages over a TransformState:
1. tags_validate: Freeze the validated active tag set
2. source_split: Split on \\r\\n, \\r or \\n
3. lines_rewrite: Classify and rewrite each line
4. output_join: Prepend annotations and join with a single \\n

Example:
    >>> transform("keep\\n//hidden secret\\nkeep2", set())
    'keep\\nkeep2'
    >>> transform("//feature extra", {"feature"}, annotations=["built for v2"])
    '// built for v2\\nextra'
"""

import re
from typing import FrozenSet, Iterable, List, Optional, Union

from ..config import appsettings
from ..models.directives import UnknownTagPolicy, COMMENT_MARKER, LINE_TERMINATOR
from ..models.state import TransformState, pipeline
from .directives import directive_match
from .tags import tagSet_build
from .log import LOG


LINE_SPLIT_PATTERN = re.compile(r'\r\n|\r|\n')


class Transformer:
    """
    Transformer bound to one validated set of active tags

    Instances hold only immutable configuration, so one Transformer can be
    shared across threads and reused for any number of source texts.
    """

    def __init__(
        self,
        tags: Iterable[str],
        policy: Optional[Union[UnknownTagPolicy, str]] = None,
        max_depth: Optional[int] = None,
    ) -> None:
        """
        Initialize transformer with the active tags

        Args:
            tags: Active tags; every entry must match [A-Za-z0-9_]+
            policy: Unknown-tag policy (default: ECOMCON_UNKNOWN_TAG_POLICY)
            max_depth: Unwrapping cap per line under PASSTHROUGH
                       (default: ECOMCON_MAX_NESTING_DEPTH)

        Raises:
            MalformedTagError: If any tag is malformed
            ValueError: If policy is not a known policy or max_depth < 1
        """
        self.activeTags: FrozenSet[str] = tagSet_build(tags)
        self.policy = UnknownTagPolicy(policy) if policy is not None else appsettings.unknown_tag_policy
        self.max_depth = max_depth if max_depth is not None else appsettings.max_nesting_depth
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    def transform(self, source: str, annotations: Iterable[str] = ()) -> str:
        """
        Transform source text

        Args:
            source: Source text containing directive lines
            annotations: Freeform lines to prepend, each rendered as "// <text>"

        Returns:
            Annotation lines followed by the rewritten source lines, joined
            with "\\n" and without a trailing terminator
        """
        if isinstance(annotations, str):
            annotations = [annotations]

        state = TransformState(
            source=source,
            tags=self.activeTags,
            annotations=tuple(annotations),
            policy=self.policy,
            max_depth=self.max_depth,
        )
        final = pipeline(
            state,
            self.tags_validate,
            self.source_split,
            self.lines_rewrite,
            self.output_join,
        )
        return final.output

    def tags_validate(self, inputstate: TransformState) -> TransformState:
        """Carry the tags validated by the constructor forward as the lookup set"""
        state = inputstate.copy()
        state.activeTags = frozenset(state.tags)
        LOG(f"Active tags: {sorted(state.activeTags)}", level=2)
        return state

    def source_split(self, inputstate: TransformState) -> TransformState:
        state = inputstate.copy()
        state.lines = self.lines_split(state.source)
        LOG(f"Split source into {len(state.lines)} lines", level=2)
        return state

    def lines_rewrite(self, inputstate: TransformState) -> TransformState:
        """
        Rewrite every line, dropping the ones that are suppressed

        Suppressed lines are left out of the list entirely so that they do
        not turn into blank lines when joined.
        """
        state = inputstate.copy()
        rewritten: List[str] = []
        suppressed = 0

        for line_number, line in enumerate(state.lines, start=1):
            result = self.line_rewrite(line)
            if result is None:
                suppressed += 1
                LOG(f"line {line_number}: suppressed", level=3)
                continue
            if result != line:
                LOG(f"line {line_number}: unwrapped to {result!r}", level=3)
            rewritten.append(result)

        state.rewritten = rewritten
        state.suppressedCount = suppressed
        LOG(
            f"Rewrote {len(state.lines)} lines, {suppressed} suppressed ({state.policy.value})",
            level=2,
        )
        return state

    def output_join(self, inputstate: TransformState) -> TransformState:
        state = inputstate.copy()
        lines = self.annotations_render(state.annotations) + state.rewritten
        state.output = LINE_TERMINATOR.join(lines)
        return state

    def lines_split(self, source: str) -> List[str]:
        """
        Split source text into lines

        \\r\\n, \\r and \\n are equivalent separators and are discarded. A
        single empty final segment (trailing terminator, or empty source)
        is dropped.

        Example:
            "a\\r\\nb\\rc\\n" -> ["a", "b", "c"]
            ""              -> []
            "a\\n\\n"         -> ["a", ""]
        """
        lines = LINE_SPLIT_PATTERN.split(source)
        if lines[-1] == "":
            lines.pop()
        return lines

    def line_rewrite(self, line: str) -> Optional[str]:
        """
        Apply the tag gate to one line

        Args:
            line: Single source line without terminator

        Returns:
            The replacement line, or None when the line is suppressed

        Example (active tags {"outer", "inner"}):
            "plain"                 -> "plain"
            "//outer payload"       -> "payload"
            "//outer//inner x"      -> "//inner x" (SUPPRESS: single pass)
            "//outer//inner x"      -> "x"         (PASSTHROUGH: stacked)
            "//other x"             -> None        (SUPPRESS)
            "//other x"             -> "//other x" (PASSTHROUGH)
        """
        if self.policy is UnknownTagPolicy.SUPPRESS:
            directive = directive_match(line)
            if directive is None:
                return line
            if directive.tag in self.activeTags:
                return directive.payload
            return None

        current = line
        for _ in range(self.max_depth):
            directive = directive_match(current)
            if directive is None or directive.tag not in self.activeTags:
                return current
            current = directive.payload

        directive = directive_match(current)
        if directive is not None and directive.tag in self.activeTags:
            LOG(f"Nesting cap {self.max_depth} reached, stopped at {current!r}", level=1)
        return current

    def annotations_render(self, annotations: Iterable[str]) -> List[str]:
        """Render each annotation verbatim as one "// <text>" line"""
        return [f"{COMMENT_MARKER} {annotation}" for annotation in annotations]


def transform(
    source: str,
    tags: Iterable[str],
    annotations: Iterable[str] = (),
    policy: Optional[Union[UnknownTagPolicy, str]] = None,
    max_depth: Optional[int] = None,
) -> str:
    """
    Transform source text against a set of active tags

    Convenience wrapper around Transformer for one-off calls.

    Args:
        source: Source text containing directive lines
        tags: Active tags; every entry must match [A-Za-z0-9_]+
        annotations: Freeform lines to prepend as "// <text>"
        policy: Unknown-tag policy (default: ECOMCON_UNKNOWN_TAG_POLICY)
        max_depth: Unwrapping cap per line under PASSTHROUGH

    Returns:
        Transformed text

    Raises:
        MalformedTagError: If any tag is malformed; no output is produced
    """
    return Transformer(tags, policy=policy, max_depth=max_depth).transform(source, annotations)
