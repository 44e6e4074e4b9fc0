"""
Transform state model and pipeline helper

Defines TransformState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple, TypeVar
from dataclasses import dataclass, field

from .directives import UnknownTagPolicy


TS = TypeVar("TS", bound="TransformState")


@dataclass
class TransformState:
    """
    Central state container for one transformation call (state bus pattern).

    Carries the inputs and intermediate results through the pipeline, with
    each stage adding new fields as the transformation progresses.

    Pipeline stages and their state additions:
        - Initial: source, tags, annotations, policy, max_depth
        - tags_validate: activeTags
        - source_split: lines
        - lines_rewrite: rewritten, suppressedCount
        - output_join: output

    Attributes:
        source: Source text to transform
        tags: Caller-supplied tags, as given
        annotations: Freeform lines prepended to the output as comments
        policy: Unknown-tag policy for this call
        max_depth: Unwrapping cap per line (PASSTHROUGH policy)
        activeTags: Validated, frozen lookup set
        lines: Source split into lines, terminators discarded
        rewritten: Per-line results with suppressed lines already dropped
        suppressedCount: Number of directive lines removed
        output: Final joined text
    """

    # Inputs
    source: str = field(default="")
    tags: Iterable[str] = field(default=())
    annotations: Tuple[str, ...] = field(default=())
    policy: UnknownTagPolicy = field(default=UnknownTagPolicy.SUPPRESS)
    max_depth: int = field(default=64)

    # Pipeline state
    activeTags: FrozenSet[str] = field(default_factory=frozenset)
    lines: List[str] = field(default_factory=list)
    rewritten: List[str] = field(default_factory=list)
    suppressedCount: int = field(default=0)
    output: Optional[str] = field(default=None)

    def copy(self: TS) -> TS:
        """
        Creates a shallow copy of the TransformState instance.

        Returns:
            A new TransformState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: TransformState, *stages: Callable[[TransformState], TransformState]
) -> TransformState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (TransformState) -> TransformState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting TransformState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final TransformState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            tags_validate,
            source_split,
            lines_rewrite,
            output_join
        )

    This is equivalent to:
        output_join(lines_rewrite(source_split(tags_validate(initial_state))))

    But reads left-to-right instead of inside-out.
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
